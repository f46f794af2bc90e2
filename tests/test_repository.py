import pytest
from pydantic import ValidationError

from talent_intake.schemas.candidate import CandidateRecord
from talent_intake.storage.repository import CandidateNotFoundError, InMemoryCandidateRepository


def _record(name="Jane Doe", score=60):
    return CandidateRecord(name=name, overall_score=score)


def test_create_assigns_id_and_timestamp(repository):
    stored = repository.create_candidate(_record(), resume_data={"filename": "cv.pdf"})
    assert stored.id
    assert stored.applied_date.tzinfo is not None
    assert stored.resume_data == {"filename": "cv.pdf"}
    assert repository.get_candidate(stored.id) == stored


def test_list_keeps_insertion_order(repository):
    for name in ("A", "B", "C"):
        repository.create_candidate(_record(name))
    assert [c.name for c in repository.list_candidates()] == ["A", "B", "C"]


def test_update_changes_only_status_and_score(repository):
    stored = repository.create_candidate(_record())
    updated = repository.update_candidate(stored.id, status="interviewed", overall_score=81)
    assert updated.status == "interviewed"
    assert updated.overall_score == 81
    assert updated.name == stored.name
    assert updated.applied_date == stored.applied_date
    assert repository.get_candidate(stored.id).status == "interviewed"


def test_update_rejects_immutable_fields_and_unknown_status(repository):
    stored = repository.create_candidate(_record())
    with pytest.raises(ValueError):
        repository.update_candidate(stored.id, name="Someone Else")
    with pytest.raises(ValueError):
        repository.update_candidate(stored.id, status="promoted")
    with pytest.raises(ValidationError):
        repository.update_candidate(stored.id, overall_score=101)


def test_update_unknown_id(repository):
    with pytest.raises(CandidateNotFoundError):
        repository.update_candidate("missing", status="hired")


def test_delete(repository):
    stored = repository.create_candidate(_record())
    assert repository.delete_candidate(stored.id) is True
    assert repository.delete_candidate(stored.id) is False
    assert repository.get_candidate(stored.id) is None


def test_upload_entries(repository):
    entry = repository.create_upload_entry("batch.csv", 3)
    repository.create_upload_entry("cv.pdf", 1, "pdf")
    entries = repository.list_upload_entries()
    assert entries[0] == entry
    assert (entry.filename, entry.candidates_count, entry.upload_type) == ("batch.csv", 3, "csv")
    assert entries[1].upload_type == "pdf"


def test_repositories_do_not_share_state():
    first, second = InMemoryCandidateRepository(), InMemoryCandidateRepository()
    first.create_candidate(_record())
    assert second.list_candidates() == []
