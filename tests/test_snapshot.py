import pytest

from plotopts.snapshot import (
    SnapshotType,
    dummy_snapshot_name,
    make_record_variable_command,
    make_recorded_file_path,
    make_remove_variables_command,
    make_replay_file_command,
    make_replay_variable_command,
    make_save_variable_command,
    make_snapshot_name,
    make_variable_name,
)


def test_dummy_snapshot_name():
    assert dummy_snapshot_name() == "snapshot_0.png"


def test_snapshot_type_in_name():
    assert make_snapshot_name(1, 2, 72, SnapshotType.SKETCH) == "snapshot_sketch_1_2_72.png"
    assert make_snapshot_name(1, 2, 72, SnapshotType.NORMAL) == "snapshot_normal_1_2_72.png"


@pytest.mark.parametrize("kind", list(SnapshotType))
def test_snapshot_name_parts(kind):
    name = make_snapshot_name(3, 4, 96, kind)
    assert name.endswith(".png")
    assert name.removesuffix(".png").split("_") == ["snapshot", str(kind), "3", "4", "96"]


def test_snapshot_name_defaults_to_normal():
    assert make_snapshot_name(1, 2, 72) == make_snapshot_name(1, 2, 72, SnapshotType.NORMAL)
    assert make_snapshot_name(1, 2, 72) != make_snapshot_name(1, 2, 72, SnapshotType.SKETCH)


def test_variable_name():
    assert make_variable_name(1, 2) == ".jetbrains$recordedSnapshot_1_2"


def test_record_command_without_ggplot():
    command = make_record_variable_command(1, 2, False)
    assert command.startswith(make_variable_name(1, 2) + " <- grDevices::recordPlot")
    assert command.endswith("recordPlot()")


def test_record_command_with_ggplot():
    command = make_record_variable_command(1, 2, True)
    assert command.startswith(make_variable_name(1, 2) + " <- ")
    assert command.endswith("(load='ggplot2')")


def test_replay_variable_command():
    assert make_replay_variable_command(7, 9) == (
        f"grDevices::replayPlot({make_variable_name(7, 9)})"
    )


def test_recorded_file_path():
    assert make_recorded_file_path("/tmp/x", 5) == "/tmp/x/recorded_5.snapshot"


def test_replay_file_command_wraps_path():
    path = make_recorded_file_path("/data", 5)
    assert make_replay_file_command("/data", 5) == (
        f".jetbrains$replayPlotFromFile('{path}')"
    )


def test_save_variable_command():
    command = make_save_variable_command("/data", 2, 6)
    variable = make_variable_name(2, 6)
    path = make_recorded_file_path("/data", 6)
    assert command == f".jetbrains$saveRecordedPlotToFile({variable}, '{path}')"


def test_remove_variables_command():
    assert make_remove_variables_command(1, 2, 3) == (
        ".jetbrains$dropRecordedSnapshots(1, 2, 3)"
    )


def test_distinct_snapshots_get_distinct_variables():
    names = {make_variable_name(d, s) for d in range(3) for s in range(3)}
    assert len(names) == 9