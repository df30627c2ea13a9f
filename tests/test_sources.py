# ==============================================
# Tests for Sources (FileService, StdinReader)
# ==============================================

import io

import pytest

from gateway_emit.errors import DataFormatError, StdinUnavailableError
from gateway_emit.sources import FileService, StdinReader


class TtyStream(io.StringIO):
    def isatty(self):
        return True


class BrokenStream(io.StringIO):
    def read(self, *args):
        raise OSError("reading from stdin while output is captured")


@pytest.fixture
def file_service():
    return FileService()


class TestFileService:
    """JSON / YAML detection and errors."""

    def test_exists(self, file_service, json_file, tmp_path):
        assert file_service.exists(str(json_file)) is True
        assert file_service.exists(str(tmp_path / "nope.json")) is False

    def test_reads_json_by_extension(self, file_service, json_file, sample_event):
        assert file_service.read_structured(str(json_file)) == sample_event

    @pytest.mark.parametrize("filename", ["event.yml", "event.yaml", "EVENT.YAML"])
    def test_reads_yaml_by_extension(self, file_service, tmp_path, filename):
        path = tmp_path / filename
        path.write_text("user:\n  id: 7\n  active: true\n", encoding="utf-8")
        assert file_service.read_structured(str(path)) == {"user": {"id": 7, "active": True}}

    def test_invalid_json_file(self, file_service, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(DataFormatError, match="broken.json"):
            file_service.read_structured(str(path))

    def test_invalid_yaml_file(self, file_service, tmp_path):
        path = tmp_path / "broken.yml"
        path.write_text("key: [unclosed\n", encoding="utf-8")
        with pytest.raises(DataFormatError, match="broken.yml"):
            file_service.read_structured(str(path))

    def test_undecodable_file(self, file_service, tmp_path):
        path = tmp_path / "binary.json"
        path.write_bytes(b"\xff\xfe\x00{")
        with pytest.raises(DataFormatError, match="binary.json"):
            file_service.read_structured(str(path))

    def test_unreadable_file(self, file_service, tmp_path):
        folder = tmp_path / "folder.json"
        folder.mkdir()
        with pytest.raises(DataFormatError, match="folder.json"):
            file_service.read_structured(str(folder))

    def test_json_file_with_nan_rejected(self, file_service, tmp_path):
        path = tmp_path / "nan.json"
        path.write_text('{"value": NaN}', encoding="utf-8")
        with pytest.raises(DataFormatError, match="nan.json"):
            file_service.read_structured(str(path))

    def test_unknown_extension_json_content(self, file_service, tmp_path):
        path = tmp_path / "event.txt"
        path.write_text('{"a": 1}', encoding="utf-8")
        assert file_service.read_structured(str(path)) == {"a": 1}

    def test_unknown_extension_yaml_content(self, file_service, tmp_path):
        path = tmp_path / "event"
        path.write_text("a: 1\nb: two\n", encoding="utf-8")
        assert file_service.read_structured(str(path)) == {"a": 1, "b": "two"}

    def test_unknown_extension_plain_text_kept(self, file_service, tmp_path):
        path = tmp_path / "note.txt"
        path.write_text("just some words", encoding="utf-8")
        assert file_service.read_structured(str(path)) == "just some words"

    def test_empty_yaml_file_is_none(self, file_service, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("", encoding="utf-8")
        assert file_service.read_structured(str(path)) is None


class TestStdinReader:
    """Reading piped input."""

    def test_reads_everything(self):
        reader = StdinReader(stream=io.StringIO('{"a": 1}\n'))
        assert reader.read_all() == '{"a": 1}\n'

    def test_none_stream_is_unavailable(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", None)
        with pytest.raises(StdinUnavailableError):
            StdinReader().read_all()

    def test_closed_stream_is_unavailable(self):
        stream = io.StringIO("data")
        stream.close()
        with pytest.raises(StdinUnavailableError):
            StdinReader(stream=stream).read_all()

    def test_tty_is_unavailable(self):
        with pytest.raises(StdinUnavailableError, match="interactive"):
            StdinReader(stream=TtyStream("data")).read_all()

    def test_read_error_is_unavailable(self):
        with pytest.raises(StdinUnavailableError, match="captured"):
            StdinReader(stream=BrokenStream()).read_all()

    def test_undecodable_input_is_a_format_error(self):
        stream = io.TextIOWrapper(io.BytesIO(b"\xff"), encoding="utf-8")
        with pytest.raises(DataFormatError):
            StdinReader(stream=stream).read_all()

    def test_defaults_to_sys_stdin(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("piped"))
        assert StdinReader().read_all() == "piped"
