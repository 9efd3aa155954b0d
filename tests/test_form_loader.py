import pathlib
import sys

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1]))
from form_data_cache.core.form_loader import load_all_forms, load_form, read_form_file
from form_data_cache.core.types import FORM_FILE_NAMES, FormId, LoadStatus, form_key


def _write_all_forms(directory):
    for form_id, name in FORM_FILE_NAMES.items():
        (directory / name).write_text(f"<{form_id.value}/>", encoding="utf-8")


def test_read_form_file_joins_lines_without_terminators(tmp_path):
    path = tmp_path / "IT201.xml"
    path.write_bytes(b"<form>\n  <a>1</a>\r\n  <b>2</b>\r</form>\n")
    assert read_form_file(str(path)) == "<form>  <a>1</a>  <b>2</b></form>"


def test_read_form_file_empty(tmp_path):
    path = tmp_path / "W2.xml"
    path.write_text("", encoding="utf-8")
    assert read_form_file(str(path)) == ""


def test_load_form_reports_missing_file(tmp_path):
    result, content = load_form(FormId.HMBR, str(tmp_path))
    assert content is None
    assert result.status is LoadStatus.MISSING
    assert result.path.endswith("HMBR.xml")
    assert result.error


def test_load_form_replaces_undecodable_bytes(tmp_path):
    (tmp_path / "W2.xml").write_bytes(b"<w2>caf\xe9</w2>")
    result, content = load_form(FormId.W2, str(tmp_path))
    assert content == "<w2>caf\ufffd</w2>"
    assert result.status is LoadStatus.LOADED


def test_load_form_reports_directory_as_unreadable(tmp_path):
    (tmp_path / "IT214.xml").mkdir()
    result, content = load_form(FormId.IT214, str(tmp_path))
    assert content is None
    assert result.status is LoadStatus.UNREADABLE


def test_load_all_forms(tmp_path):
    _write_all_forms(tmp_path)
    data, report = load_all_forms("default", str(tmp_path))

    assert report.ok
    assert len(data) == 7
    assert data[form_key(FormId.PAYMENT)] == "<PAYMENT/>"
    assert report.result_for(FormId.PAYMENT).length == len("<PAYMENT/>")


def test_one_missing_file_does_not_stop_the_rest(tmp_path):
    _write_all_forms(tmp_path)
    (tmp_path / "DEPEXEMPT.xml").unlink()

    data, report = load_all_forms("default", str(tmp_path))

    assert form_key(FormId.DEPEXEMPT) not in data
    assert len(data) == 6
    assert [r.form_id for r in report.failed] == [FormId.DEPEXEMPT]


def test_no_base_path_fails_every_form():
    data, report = load_all_forms("unknown-app", None)

    assert data == {}
    assert report.base_path is None
    assert len(report.failed) == 7
    assert all(r.status is LoadStatus.NO_APP_PATH for r in report.failed)
    assert "unknown-app" in report.failed[0].error
