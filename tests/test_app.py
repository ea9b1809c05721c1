import pytest

from flowind.app import FlowIndicatorPlistPreCheck, ProgramManager, main


def test_start_plist_argument_returns_path():
    assert ProgramManager().start(["-PLIST:flow.plist"]) == "flow.plist"


@pytest.mark.parametrize(
    "argv", [[], ["--help"], ["plain"], ["-PLIST:a", "extra"]]
)
def test_start_without_plist_stage(argv):
    assert ProgramManager().start(argv) is None


def test_run_plist_stage_extracts_path():
    stage = FlowIndicatorPlistPreCheck()
    assert stage.run_plist_stage("x-PLIST:dir/list.plist") == "dir/list.plist"


def test_run_plist_stage_without_prefix_raises():
    with pytest.raises(ValueError):
        FlowIndicatorPlistPreCheck().run_plist_stage("list.plist")


def test_plist_parser_reads_names(tmp_path, capsys):
    plist = tmp_path / "list.plist"
    plist.write_text("  Pat  name1;\nPat\tname2 extra\nnothing here\nPat   \n")
    stage = FlowIndicatorPlistPreCheck()
    assert stage.plist_parser(str(plist)) == ["name1", "name2"]
    out = capsys.readouterr().out
    assert "Extracted Pat names:" in out
    assert "name2" in out


def test_plist_parser_accumulates(tmp_path):
    plist = tmp_path / "list.plist"
    plist.write_text("Pat one;\n")
    stage = FlowIndicatorPlistPreCheck()
    stage.plist_parser(str(plist))
    assert stage.plist_parser(str(plist)) == ["one", "one"]
    assert stage.pat_names == ["one", "one"]


def test_plist_parser_missing_file(tmp_path, capsys):
    stage = FlowIndicatorPlistPreCheck()
    assert stage.plist_parser(str(tmp_path / "missing.plist")) == []
    assert "Error opening file" in capsys.readouterr().err


@pytest.mark.parametrize("argv", [["--help"], ["-PLIST:flow.plist"], []])
def test_main_returns_zero(argv):
    assert main(argv) == 0