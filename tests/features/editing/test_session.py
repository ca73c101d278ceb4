"""Tests for the selection session state machine and save loop."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import pytest
from pytest_mock import MockerFixture

from metanote.features.editing import (
    UNRESOLVED,
    UNRESOLVED_TEXT,
    EditView,
    SelectionSession,
    SessionEvent,
    SessionState,
    SessionStateError,
)
from metanote.shared import CodecError, NotATrackFile, ParseError, TagRecord


@pytest.fixture
def session(fake_io: Any) -> SelectionSession:
    """Session wired to the in-memory codec."""
    return SelectionSession(reader=fake_io, writer=fake_io)


@pytest.fixture
def paths(album_records: list[TagRecord]) -> list[Path]:
    return [record.path for record in album_records if record.path is not None]


class TestSelect:
    """Selecting records and the states it leads to."""

    def test_starts_empty(self, session: SelectionSession) -> None:
        assert session.state is SessionState.EMPTY
        assert session.edit_view is None
        assert session.records == ()

    def test_select_merges_and_views(
        self, session: SelectionSession, album_records: list[TagRecord]
    ) -> None:
        view = session.select(album_records)

        assert session.state is SessionState.VIEWING
        assert view is session.edit_view
        assert view is not None
        assert view.album == "The Wall"
        assert view.title is UNRESOLVED
        assert session.records == tuple(album_records)

    def test_select_empty_goes_back_to_empty(
        self, session: SelectionSession, album_records: list[TagRecord]
    ) -> None:
        _ = session.select(album_records)

        assert session.select([]) is None
        assert session.state is SessionState.EMPTY
        assert session.edit_view is None

    def test_reselect_discards_previous_edits(
        self, session: SelectionSession, album_records: list[TagRecord]
    ) -> None:
        _ = session.select(album_records)
        _ = session.apply_input("album", "Edited")

        view = session.select(album_records[:1])

        assert view is not None
        assert view.album == "The Wall"
        assert view.title == "Hey You"

    def test_clear(self, session: SelectionSession, album_records: list[TagRecord]) -> None:
        _ = session.select(album_records)

        session.clear()

        assert session.state is SessionState.EMPTY

    def test_select_logs_event(
        self,
        session: SelectionSession,
        album_records: list[TagRecord],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="metanote"):
            _ = session.select(album_records)

        events = [getattr(record, "session_event", None) for record in caplog.records]
        assert SessionEvent.SELECT in events


class TestOpen:
    """Reading paths into the selection."""

    def test_open_selects_readable_files(
        self, session: SelectionSession, paths: list[Path]
    ) -> None:
        failures = session.open(paths)

        assert failures == []
        assert [record.path for record in session.records] == paths
        assert session.state is SessionState.VIEWING

    def test_unreadable_file_is_excluded_from_merge(
        self, session: SelectionSession, paths: list[Path]
    ) -> None:
        missing = Path("/music/wall/not-a-file")

        failures = session.open([paths[0], missing])

        assert len(failures) == 1
        assert failures[0].path == missing
        assert isinstance(failures[0].error, NotATrackFile)
        assert [record.path for record in session.records] == [paths[0]]
        view = session.edit_view
        assert view is not None
        assert view.title == "Hey You"

    def test_codec_failure_is_reported(
        self, session: SelectionSession, fake_io: Any, paths: list[Path], codec_error: CodecError
    ) -> None:
        fake_io.fail_reads[paths[1]] = codec_error

        failures = session.open(paths)

        assert [failure.error for failure in failures] == [codec_error]
        assert len(session.records) == 2

    def test_all_unreadable_leaves_session_empty(self, session: SelectionSession) -> None:
        failures = session.open([Path("/nope/1.mp3"), Path("/nope/2.mp3")])

        assert len(failures) == 2
        assert session.state is SessionState.EMPTY

    def test_open_without_reader(self, fake_io: Any) -> None:
        session = SelectionSession(writer=fake_io)

        with pytest.raises(SessionStateError):
            _ = session.open([Path("/music/wall/01.flac")])


class TestEditing:
    """Mutating the current view."""

    def test_edit_view_setter(self, session: SelectionSession, album_records: list[TagRecord]) -> None:
        _ = session.select(album_records)
        view = session.edit_view
        assert view is not None

        session.edit_view = view.with_changes(genre="Prog")

        assert session.edit_view is not None
        assert session.edit_view.genre == "Prog"

    def test_edit_view_setter_requires_selection(self, session: SelectionSession) -> None:
        with pytest.raises(SessionStateError):
            session.edit_view = EditView()

    def test_apply_input_parses_numbers(
        self, session: SelectionSession, album_records: list[TagRecord]
    ) -> None:
        _ = session.select(album_records)

        view = session.apply_input("track_total", "14")

        assert view.track_total == 14

    def test_apply_input_blank_keeps_unresolved(
        self, session: SelectionSession, album_records: list[TagRecord]
    ) -> None:
        _ = session.select(album_records)

        view = session.apply_input("title", "")

        assert view.title is UNRESOLVED

    def test_apply_input_placeholder_token_keeps_unresolved(
        self, session: SelectionSession, album_records: list[TagRecord]
    ) -> None:
        _ = session.select(album_records)

        view = session.apply_input("title", UNRESOLVED_TEXT)

        assert view.title is UNRESOLVED

    def test_apply_input_blank_clears_shared_field(
        self, session: SelectionSession, album_records: list[TagRecord]
    ) -> None:
        _ = session.select(album_records)

        view = session.apply_input("genre", "")

        assert view.genre is None

    def test_apply_input_rejects_bad_number(
        self, session: SelectionSession, album_records: list[TagRecord]
    ) -> None:
        _ = session.select(album_records)

        with pytest.raises(ParseError):
            _ = session.apply_input("disc_number", "two")

    def test_apply_input_requires_selection(self, session: SelectionSession) -> None:
        with pytest.raises(SessionStateError):
            _ = session.apply_input("title", "X")


class TestSave:
    """Resolving and writing the selection."""

    def test_save_requires_selection(self, session: SelectionSession) -> None:
        with pytest.raises(SessionStateError, match="save"):
            _ = session.save()

    def test_unedited_save_writes_originals(
        self,
        session: SelectionSession,
        fake_io: Any,
        album_records: list[TagRecord],
        paths: list[Path],
    ) -> None:
        _ = session.open(paths)

        results = session.save()

        assert all(result.success for result in results)
        assert [path for path, _ in fake_io.writes] == paths
        assert [record for _, record in fake_io.writes] == album_records

    def test_edit_broadcasts_and_keeps_untouched_fields(
        self,
        session: SelectionSession,
        fake_io: Any,
        album_records: list[TagRecord],
        paths: list[Path],
    ) -> None:
        _ = session.open(paths)
        _ = session.apply_input("artist", "Roger Waters")

        _ = session.save()

        for original, path in zip(album_records, paths, strict=True):
            written = fake_io.files[path]
            assert written.artist == "Roger Waters"
            assert written.title == original.title
            assert written.track_number == original.track_number
            assert written.comment == original.comment

    def test_results_align_with_selection(
        self, session: SelectionSession, fake_io: Any, paths: list[Path], codec_error: CodecError
    ) -> None:
        fake_io.fail_writes[paths[1]] = codec_error
        _ = session.open(paths)
        _ = session.apply_input("album", "Live")

        results = session.save()

        assert [result.path for result in results] == paths
        assert [result.success for result in results] == [True, False, True]
        assert results[1].error is codec_error
        assert results[1].error_message is not None

    def test_failure_does_not_stop_or_roll_back(
        self, session: SelectionSession, fake_io: Any, paths: list[Path], codec_error: CodecError
    ) -> None:
        fake_io.fail_writes[paths[0]] = codec_error
        _ = session.open(paths)
        _ = session.apply_input("album", "Live")

        _ = session.save()

        assert [path for path, _ in fake_io.writes] == paths[1:]
        assert fake_io.files[paths[0]].album == "The Wall"
        assert fake_io.files[paths[2]].album == "Live"

    def test_save_refreshes_records_and_view(
        self, session: SelectionSession, fake_io: Any, paths: list[Path], codec_error: CodecError
    ) -> None:
        fake_io.fail_writes[paths[0]] = codec_error
        _ = session.open(paths)
        _ = session.apply_input("album", "Live")

        _ = session.save()

        assert session.state is SessionState.VIEWING
        assert [record.album for record in session.records] == ["The Wall", "Live", "Live"]
        view = session.edit_view
        assert view is not None
        assert view.album is UNRESOLVED

    def test_record_without_path_fails_alone(self, session: SelectionSession) -> None:
        _ = session.select([TagRecord(title="Orphan"), TagRecord(title="Orphan")])

        results = session.save()

        assert [isinstance(result.error, NotATrackFile) for result in results] == [True, True]

    def test_scenario_set_conflicting_artist(self, fake_io_factory: Any) -> None:
        paths = [Path("1.mp3"), Path("2.mp3"), Path("3.mp3")]
        io = fake_io_factory(
            {
                paths[0]: TagRecord(artist="A"),
                paths[1]: TagRecord(artist="A"),
                paths[2]: TagRecord(artist="B"),
            }
        )
        session = SelectionSession(reader=io, writer=io)
        _ = session.open(paths)
        assert session.edit_view is not None
        assert session.edit_view.artist is UNRESOLVED

        _ = session.apply_input("artist", "C")
        _ = session.save()

        assert [io.files[path].artist for path in paths] == ["C", "C", "C"]

    def test_scenario_unedited_shared_title(self, fake_io_factory: Any) -> None:
        paths = [Path("1.mp3"), Path("2.mp3"), Path("3.mp3")]
        io = fake_io_factory({path: TagRecord(title="X") for path in paths})
        session = SelectionSession(reader=io, writer=io)
        _ = session.open(paths)
        assert session.edit_view is not None
        assert session.edit_view.title == "X"

        _ = session.save()

        assert [io.files[path].title for path in paths] == ["X", "X", "X"]

    def test_unexpected_error_restores_viewing_state(
        self, mocker: MockerFixture, album_records: list[TagRecord]
    ) -> None:
        writer = mocker.MagicMock()
        writer.write.side_effect = RuntimeError("boom")
        session = SelectionSession(writer=writer)
        _ = session.select(album_records)

        with pytest.raises(RuntimeError, match="boom"):
            _ = session.save()

        assert session.state is SessionState.VIEWING

    def test_writer_receives_resolved_records(
        self, mocker: MockerFixture, album_records: list[TagRecord]
    ) -> None:
        writer = mocker.MagicMock()
        session = SelectionSession(writer=writer)
        _ = session.select(album_records)
        _ = session.apply_input("year", "1980")

        _ = session.save()

        assert writer.write.call_count == 3
        for call, original in zip(writer.write.call_args_list, album_records, strict=True):
            path, record = call.args
            assert path == original.path
            assert record.year == "1980"
            assert record.title == original.title
