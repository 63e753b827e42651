"""Names of snapshot files and the R commands that record and replay plots."""

from __future__ import annotations

import enum

ENVIRONMENT_NAME = ".jetbrains"
DUMMY_SNAPSHOT_NAME = "snapshot_0.png"
RECORDED_SNAPSHOT_PREFIX = "recordedSnapshot"
RECORD_COMMAND_NAME = "grDevices::recordPlot"
REPLAY_COMMAND_NAME = "grDevices::replayPlot"


class SnapshotType(enum.Enum):
    """Quality of a rendered snapshot."""

    SKETCH = "sketch"
    NORMAL = "normal"

    def __str__(self) -> str:
        return self.value


def dummy_snapshot_name() -> str:
    """The file name used once a plot has already been written out."""
    return DUMMY_SNAPSHOT_NAME


def make_snapshot_name(
    number: int,
    version: int,
    resolution: int,
    snapshot_type: SnapshotType = SnapshotType.NORMAL,
) -> str:
    return f"snapshot_{snapshot_type}_{number}_{version}_{resolution}.png"


def make_variable_name(device_number: int, snapshot_number: int) -> str:
    return (
        f"{ENVIRONMENT_NAME}${RECORDED_SNAPSHOT_PREFIX}"
        f"_{device_number}_{snapshot_number}"
    )


def _record_command(receiver_name: str, has_ggplot: bool) -> str:
    arguments = "(load='ggplot2')" if has_ggplot else "()"
    return f"{receiver_name} <- {RECORD_COMMAND_NAME}{arguments}"


def make_record_variable_command(
    device_number: int, snapshot_number: int, has_ggplot: bool
) -> str:
    return _record_command(make_variable_name(device_number, snapshot_number), has_ggplot)


def make_replay_variable_command(device_number: int, snapshot_number: int) -> str:
    name = make_variable_name(device_number, snapshot_number)
    return f"{REPLAY_COMMAND_NAME}({name})"


def make_recorded_file_path(directory: str, snapshot_number: int) -> str:
    return f"{directory}/recorded_{snapshot_number}.snapshot"


def make_replay_file_command(directory: str, snapshot_number: int) -> str:
    file_path = make_recorded_file_path(directory, snapshot_number)
    return f"{ENVIRONMENT_NAME}$replayPlotFromFile('{file_path}')"


def make_save_variable_command(
    directory: str, device_number: int, snapshot_number: int
) -> str:
    variable_name = make_variable_name(device_number, snapshot_number)
    file_path = make_recorded_file_path(directory, snapshot_number)
    return f"{ENVIRONMENT_NAME}$saveRecordedPlotToFile({variable_name}, '{file_path}')"


def make_remove_variables_command(device_number: int, first: int, last: int) -> str:
    return f"{ENVIRONMENT_NAME}$dropRecordedSnapshots({device_number}, {first}, {last})"