"""Tests for source and sink creation from paths."""

import pytest

from chromakey.core import ConfigurationError, MediaType, SinkType
from chromakey.media_factory import (
    IMAGE_EXTENSIONS, VIDEO_EXTENSIONS,
    create_sink, create_source, get_file_extension, sink_type_for,
)
from chromakey.sinks import DummySink, ImageFileSink
from chromakey.sources import ImageFileSource, WebcamSource


def test_extension_is_lower_cased():
    assert get_file_extension("clip.MP4") == ".mp4"
    assert get_file_extension("/a/b/photo.JpEg") == ".jpeg"
    assert get_file_extension("noext") == ""


def test_allow_lists():
    assert IMAGE_EXTENSIONS == {".jpg", ".jpeg", ".png", ".bmp"}
    assert VIDEO_EXTENSIONS == {".mp4", ".avi"}


class TestCreateSource:
    def test_image(self, write_image, green_frame):
        path = write_image("BG.PNG", green_frame)
        source = create_source(path, loop=True)
        assert isinstance(source, ImageFileSource)
        assert source.media_type == MediaType.IMAGE
        assert source.is_looped

    def test_video(self, write_video, green_frame):
        path = write_video("clip.avi", [green_frame, green_frame])
        source = create_source(path)
        assert source.media_type == MediaType.VIDEO
        assert not source.is_looped

    def test_webcam(self):
        assert isinstance(create_source("webcam:0"), WebcamSource)

    @pytest.mark.parametrize("name", ["anim.gif", "clip.mkv", "noext"])
    def test_unsupported(self, tmp_path, name):
        path = tmp_path / name
        path.write_bytes(b"\x00")
        with pytest.raises(ConfigurationError, match="not supported"):
            create_source(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            create_source(tmp_path / "missing.jpg")


class TestCreateSink:
    @pytest.mark.parametrize("path", [None, ""])
    def test_no_path_gives_dummy(self, path):
        sink = create_sink(path, (32, 24))
        assert isinstance(sink, DummySink)
        assert sink.media_type == SinkType.DUMMY

    def test_image(self, tmp_path):
        sink = create_sink(tmp_path / "out.jpg", (32, 24))
        assert isinstance(sink, ImageFileSink)

    def test_unsupported(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not supported"):
            create_sink(tmp_path / "out.gif", (32, 24))


class TestSinkTypeFor:
    @pytest.mark.parametrize("path, expected", [
        (None, SinkType.DUMMY),
        ("", SinkType.DUMMY),
        ("out.PNG", SinkType.IMAGE),
        ("out.jpeg", SinkType.IMAGE),
        ("clip.mp4", SinkType.VIDEO),
        ("clip.avi", SinkType.VIDEO),
    ])
    def test_kind_from_extension(self, path, expected):
        assert sink_type_for(path) == expected

    def test_does_not_create_the_file(self, tmp_path):
        path = tmp_path / "clip.mp4"
        assert sink_type_for(path) == SinkType.VIDEO
        assert not path.exists()

    def test_unsupported(self):
        with pytest.raises(ConfigurationError, match="Output file type is not supported"):
            sink_type_for("out.gif")
