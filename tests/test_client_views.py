from datetime import datetime, timezone

from jobtrack.client import JobBoard, JobStore, JobTrackClient
from jobtrack.client.store import Job
from jobtrack.client.views import (
    build_detail_view, build_kanban_view, build_list_view,
    format_created, render_detail, render_kanban, render_list,
)
from jobtrack.schemas import JobStatus

JOBS = (
    Job(id="1", company="Acme", position="Eng", status=JobStatus.INTERVIEW),
    Job(id="2", company="Globex", position="PM", status=JobStatus.APPLIED),
    Job(id="3", company="Initech", position="QA", status=JobStatus.INTERVIEW,
        email="hr@initech.com", created_at=datetime(2026, 3, 5, 14, 30)),
)


def test_list_view_groups_in_status_order():
    view = build_list_view(JOBS, selected_job_id="3", collapsed=[JobStatus.OFFER])

    assert [group.status for group in view.groups] == [
        JobStatus.APPLIED, JobStatus.INTERVIEW, JobStatus.OFFER, JobStatus.REJECTED,
    ]
    assert [group.count for group in view.groups] == [1, 2, 0, 0]
    assert [job.id for job in view.groups[1].jobs] == ["1", "3"]
    assert view.groups[2].collapsed is True


def test_render_list_marks_selection_and_empty_groups():
    text = render_list(build_list_view(JOBS, selected_job_id="3", collapsed=[JobStatus.REJECTED]))

    assert text.splitlines() == [
        "- APPLIED (1)",
        "    Globex - PM",
        "- INTERVIEW (2)",
        "    Acme - Eng",
        "  > Initech - QA",
        "- OFFER (0)",
        "    No jobs",
        "+ REJECTED (0)",
    ]


def test_kanban_columns():
    columns = build_kanban_view(JOBS)

    assert [column.status for column in columns] == list(JobStatus)
    assert [card.id for card in columns[1].cards] == ["1", "3"]

    lines = render_kanban(columns, width=12).splitlines()
    assert lines[0].startswith("APPLIED (1)")
    assert "INTERVIEW..." in lines[0]
    assert "Globex" in lines[2] and "Acme" in lines[2]
    assert "Initech" in lines[4]


def test_detail_view():
    view = build_detail_view(JOBS[2])

    assert view.title == "QA"
    assert view.created == "March 5, 2026 at 02:30 PM"
    text = render_detail(view)
    assert "Contact Email: hr@initech.com" in text
    assert "Status:        INTERVIEW" in text


def test_utc_timestamp_is_shown_in_local_time():
    local = datetime(2026, 3, 5, 14, 30).astimezone()
    from_server = local.astimezone(timezone.utc)

    assert format_created(from_server) == "March 5, 2026 at 02:30 PM"


def test_detail_without_email_or_timestamp():
    text = render_detail(build_detail_view(JOBS[0]))

    assert "Contact Email: No email" in text
    assert format_created(None) in text


def test_board_views_follow_store():
    board = JobBoard(JobTrackClient(base_url="http://api.test"), JobStore(JOBS))

    board.select("2")
    assert board.detail_view().company == "Globex"
    board.toggle_group("APPLIED")
    assert board.list_view().groups[0].collapsed is True
    board.toggle_group(JobStatus.APPLIED)
    assert board.list_view().groups[0].collapsed is False

    board.store.update("2", status=JobStatus.OFFER)
    assert [card.id for card in board.kanban_view()[2].cards] == ["2"]

    board.store.remove("2")
    assert board.detail_view() is None
