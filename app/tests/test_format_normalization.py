from __future__ import annotations

from typing import cast
from unittest import TestCase

from ytcompat.core.contract.info import (
    VideoFormat,
    VideoInfo,
    codecs_from_format,
    container_from_ext,
    extract_itag,
    format_length_seconds,
)
from ytcompat.core.downloader import YtDlpFormat, YtDlpInfoResult


class ItagDerivationTests(TestCase):
    def test_numeric_format_id_yields_itag(self) -> None:
        self.assertEqual(extract_itag("140"), 140)
        self.assertEqual(extract_itag("0"), 0)

    def test_non_numeric_format_ids_have_no_itag(self) -> None:
        for format_id in ("hls-1080p", "dash-audio", "140-drc", " 140", "14.0", "", "-1"):
            with self.subTest(format_id=format_id):
                self.assertIsNone(extract_itag(format_id))

    def test_non_ascii_digits_are_rejected(self) -> None:
        self.assertIsNone(extract_itag("١٤٠"))

    def test_missing_format_id_has_no_itag(self) -> None:
        self.assertIsNone(extract_itag(None))
        self.assertIsNone(extract_itag(True))


class ContainerInferenceTests(TestCase):
    def test_known_extensions_map_to_themselves(self) -> None:
        for ext in ("webm", "mp4", "m4a", "ogg"):
            with self.subTest(ext=ext):
                self.assertEqual(container_from_ext(ext), ext)

    def test_lookup_is_case_insensitive(self) -> None:
        self.assertEqual(container_from_ext("MP4"), "mp4")
        self.assertEqual(container_from_ext("Opus"), "webm")

    def test_opus_is_packaged_in_webm(self) -> None:
        self.assertEqual(container_from_ext("opus"), "webm")

    def test_unknown_extension_passes_through_with_case(self) -> None:
        self.assertEqual(container_from_ext("flv"), "flv")
        self.assertEqual(container_from_ext("MKV"), "MKV")

    def test_empty_or_missing_extension_is_unknown(self) -> None:
        self.assertEqual(container_from_ext(""), "unknown")
        self.assertEqual(container_from_ext(None), "unknown")


class CodecCompositionTests(TestCase):
    def test_muxed_stream_joins_audio_and_video(self) -> None:
        self.assertEqual(
            codecs_from_format({"acodec": "mp4a.40.2", "vcodec": "avc1.64001F"}),
            "mp4a.40.2+avc1.64001F",
        )

    def test_single_elementary_stream(self) -> None:
        self.assertEqual(codecs_from_format({"acodec": "opus", "vcodec": "none"}), "opus")
        self.assertEqual(codecs_from_format({"vcodec": "vp9"}), "vp9")

    def test_missing_codecs_are_unknown(self) -> None:
        self.assertEqual(codecs_from_format({}), "unknown")
        self.assertEqual(codecs_from_format({"acodec": "none", "vcodec": "none"}), "unknown")
        self.assertEqual(codecs_from_format({"acodec": None, "vcodec": ""}), "unknown")


class VideoFormatTests(TestCase):
    def test_audio_only_format_fields(self) -> None:
        raw = cast(
            YtDlpFormat,
            {
                "url": "https://media.example.test/140",
                "format_id": "140",
                "ext": "m4a",
                "acodec": "mp4a.40.2",
                "vcodec": "none",
                "abr": 128,
                "asr": 44100,
                "tbr": 129.5,
                "filesize": 2048,
                "format_note": "medium",
                "loudness": -7.5,
            },
        )

        fmt = VideoFormat.from_format(raw, is_live=False)

        self.assertEqual(fmt.url, "https://media.example.test/140")
        self.assertEqual(fmt.format_id, "140")
        self.assertEqual(fmt.itag, 140)
        self.assertEqual(fmt.container, "m4a")
        self.assertEqual(fmt.codecs, "mp4a.40.2")
        self.assertEqual(fmt.asr, 44100)
        self.assertEqual(fmt.audio_sample_rate, "44100")
        self.assertEqual(fmt.average_bitrate, 128)
        self.assertEqual(fmt.abr, 128)
        self.assertEqual(fmt.bitrate, 129.5)
        self.assertEqual(fmt.loudness_db, -7.5)
        self.assertEqual(fmt.filesize, 2048)
        self.assertEqual(fmt.format_note, "medium")
        self.assertTrue(fmt.has_audio)
        self.assertFalse(fmt.has_video)
        self.assertIsNone(fmt.quality_label)
        self.assertFalse(fmt.is_live)

    def test_missing_fields_fall_back_to_defaults(self) -> None:
        fmt = VideoFormat.from_format(cast(YtDlpFormat, {}), is_live=True)

        self.assertIsNone(fmt.url)
        self.assertIsNone(fmt.itag)
        self.assertEqual(fmt.acodec, "none")
        self.assertEqual(fmt.vcodec, "none")
        self.assertEqual(fmt.container, "unknown")
        self.assertEqual(fmt.codecs, "unknown")
        self.assertIsNone(fmt.audio_sample_rate)
        self.assertIsNone(fmt.bitrate)
        self.assertTrue(fmt.is_live)

    def test_string_valued_fields_are_copied_verbatim(self) -> None:
        raw = cast(
            YtDlpFormat,
            {
                "format_id": "140",
                "asr": "44100",
                "abr": "128",
                "tbr": "130",
                "filesize": "2048",
                "loudness": "-7.5",
                "format_note": 360,
            },
        )

        fmt = VideoFormat.from_format(raw, is_live=False)

        self.assertEqual(fmt.asr, "44100")
        self.assertEqual(fmt.audio_sample_rate, "44100")
        self.assertEqual(fmt.abr, "128")
        self.assertEqual(fmt.average_bitrate, "128")
        self.assertEqual(fmt.bitrate, "130")
        self.assertEqual(fmt.filesize, "2048")
        self.assertEqual(fmt.loudness_db, "-7.5")
        self.assertEqual(fmt.format_note, 360)

    def test_float_sample_rate_renders_like_json(self) -> None:
        fmt = VideoFormat.from_format(cast(YtDlpFormat, {"asr": 48000.0}), is_live=False)

        self.assertEqual(fmt.audio_sample_rate, "48000")
        self.assertIsNone(
            VideoFormat.from_format(cast(YtDlpFormat, {"asr": 0}), is_live=False).audio_sample_rate
        )

    def test_wrong_typed_identity_fields(self) -> None:
        raw = cast(YtDlpFormat, {"format_id": "hls-720p", "ext": 42})

        fmt = VideoFormat.from_format(raw, is_live=False)

        self.assertIsNone(fmt.itag)
        self.assertEqual(fmt.format_id, "hls-720p")
        self.assertIsNone(fmt.ext)
        self.assertEqual(fmt.container, "unknown")

    def test_video_quality_label(self) -> None:
        raw = cast(
            YtDlpFormat,
            {"format_id": "299", "ext": "mp4", "vcodec": "avc1.64002a", "height": 1080, "fps": 60},
        )

        fmt = VideoFormat.from_format(raw, is_live=False)

        self.assertEqual(fmt.quality_label, "1080p60")
        self.assertEqual(fmt.height, 1080)
        self.assertTrue(fmt.has_video)
        self.assertFalse(fmt.has_audio)


class VideoInfoTests(TestCase):
    def test_concert_record(self) -> None:
        payload = cast(
            YtDlpInfoResult,
            {
                "title": "Concert",
                "duration": 125,
                "formats": [
                    {
                        "format_id": "140",
                        "ext": "m4a",
                        "acodec": "mp4a.40.2",
                        "vcodec": "none",
                        "abr": 128,
                        "asr": 44100,
                    }
                ],
            },
        )

        info = VideoInfo.from_record(payload)

        self.assertEqual(info.video_details.title, "Concert")
        self.assertEqual(info.video_details.length_seconds, "125")
        self.assertFalse(info.video_details.is_live_content)
        self.assertEqual(len(info.formats), 1)
        fmt = info.formats[0]
        self.assertEqual(fmt.itag, 140)
        self.assertEqual(fmt.container, "m4a")
        self.assertEqual(fmt.codecs, "mp4a.40.2")
        self.assertEqual(fmt.audio_sample_rate, "44100")

    def test_missing_duration_renders_zero_and_is_live(self) -> None:
        info = VideoInfo.from_record(cast(YtDlpInfoResult, {"title": "Stream"}))

        self.assertEqual(info.video_details.length_seconds, "0")
        self.assertTrue(info.video_details.is_live_content)
        self.assertEqual(info.formats, ())

    def test_duration_formatting(self) -> None:
        self.assertEqual(format_length_seconds({"duration": 125.0}), "125")
        self.assertEqual(format_length_seconds({"duration": 12.5}), "12.5")
        self.assertEqual(format_length_seconds({"duration": 0}), "0")
        self.assertEqual(format_length_seconds({"duration": None}), "0")

    def test_malformed_formats_are_skipped(self) -> None:
        payload = cast(
            YtDlpInfoResult,
            {"title": "Odd", "duration": 10, "formats": [None, "bogus", {"format_id": "18"}]},
        )

        info = VideoInfo.from_record(payload)

        self.assertEqual([fmt.itag for fmt in info.formats], [18])

    def test_formats_not_a_list_yield_no_formats(self) -> None:
        info = VideoInfo.from_record(
            cast(YtDlpInfoResult, {"title": "Odd", "duration": 10, "formats": "18"})
        )

        self.assertEqual(info.formats, ())

    def test_supplementary_details(self) -> None:
        payload = cast(
            YtDlpInfoResult,
            {
                "id": "abc123",
                "title": "Talk",
                "duration": 60,
                "uploader": "Channel",
                "upload_date": "20240131",
                "view_count": 1500,
                "webpage_url": "https://www.youtube.com/watch?v=abc123",
            },
        )

        details = VideoInfo.from_record(payload).video_details

        self.assertEqual(details.video_id, "abc123")
        self.assertEqual(details.author, "Channel")
        self.assertEqual(details.upload_date, "2024-01-31")
        self.assertEqual(details.view_count, "1500")
        self.assertEqual(details.video_url, "https://www.youtube.com/watch?v=abc123")
