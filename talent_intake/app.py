"""
Talent Intake – Streamlit frontend.
No business logic in layout; orchestration, filtering and analytics live in services.
"""

import csv
import io
from typing import List

import streamlit as st

from talent_intake.config import CANDIDATE_STATUSES, EVALUATION_PROVIDER
from talent_intake.errors import TalentIntakeError
from talent_intake.schemas.candidate import StoredCandidate
from talent_intake.scoring.evaluation_service import get_evaluation_service
from talent_intake.services.analytics_service import (
    experience_distribution,
    score_source_counts,
    skill_frequency,
    status_distribution,
    top_candidates,
)
from talent_intake.services.filter_service import (
    ALL_STATUSES,
    filter_by_min_score,
    filter_by_status,
    search_candidates,
)
from talent_intake.services.upload_service import UploadOrchestrator
from talent_intake.storage.repository import CandidateRepository, InMemoryCandidateRepository

STATUS_FILTER_OPTIONS = [ALL_STATUSES] + CANDIDATE_STATUSES


@st.cache_resource
def get_repository() -> CandidateRepository:
    """One repository per Streamlit server process."""
    return InMemoryCandidateRepository()


def _get_orchestrator(repository: CandidateRepository) -> UploadOrchestrator:
    return UploadOrchestrator(repository, evaluation_service=get_evaluation_service())


def _export_csv(candidates: List[StoredCandidate]) -> bytes:
    """Export candidates to CSV bytes."""
    out = io.StringIO()
    writer = csv.writer(out)
    headers = [
        "name", "email", "phone", "position", "skills", "experience", "education",
        "overall_score", "score_source", "status", "applied_date",
    ]
    writer.writerow(headers)
    for c in candidates:
        writer.writerow([
            c.name,
            c.email,
            c.phone or "",
            c.position,
            "; ".join(c.skills),
            c.experience,
            c.education or "",
            c.overall_score,
            c.score_source,
            c.status,
            c.applied_date.isoformat(),
        ])
    return out.getvalue().encode("utf-8")


def _render_upload(orchestrator: UploadOrchestrator) -> None:
    st.subheader("Upload Candidates")
    col_csv, col_resume = st.columns(2)
    with col_csv:
        csv_file = st.file_uploader("Candidate CSV", type=["csv"], key="csv_upload")
        if st.button("Import CSV", key="import_csv_btn", disabled=csv_file is None):
            with st.spinner("Parsing and scoring candidates…"):
                try:
                    result = orchestrator.process_csv_upload(csv_file.getvalue(), csv_file.name)
                except TalentIntakeError as e:
                    st.error(str(e))
                else:
                    st.success(f"Imported {result.count} candidates from {csv_file.name}.")
                    if result.degraded:
                        st.warning(
                            f"{result.fallback_count} of {result.count} scores are fallback estimates "
                            "(AI evaluation unavailable)."
                        )
    with col_resume:
        resume_file = st.file_uploader("Resume (PDF or DOCX)", type=["pdf", "docx"], key="resume_upload")
        if st.button("Import Resume", key="import_resume_btn", disabled=resume_file is None):
            with st.spinner("Reading resume…"):
                try:
                    result = orchestrator.process_pdf_upload(resume_file.getvalue(), resume_file.name)
                except TalentIntakeError as e:
                    st.error(str(e))
                else:
                    st.success(f"Imported {result.candidate.name} ({result.candidate.position}).")
                    if result.degraded:
                        st.warning("Score is a fallback estimate (AI evaluation unavailable).")


def _render_analytics(candidates: List[StoredCandidate]) -> None:
    with st.expander("Analytics"):
        col_a, col_b = st.columns(2)
        with col_a:
            st.markdown("**Top skills**")
            for skill, count in skill_frequency(candidates):
                st.markdown(f"- **{skill}** ({count})")
            st.markdown("**Status**")
            for status, count in status_distribution(candidates):
                st.markdown(f"- {status.title()}: {count}")
        with col_b:
            st.markdown("**Experience**")
            for label, count in experience_distribution(candidates):
                st.markdown(f"- {label}: {count}")
            st.markdown("**Top candidates**")
            for c in top_candidates(candidates):
                st.markdown(f"- {c.name} · {c.position} · **{c.overall_score}**")
        ai_count, fallback_count = score_source_counts(candidates)
        st.caption(f"AI-scored: {ai_count} · Fallback-scored: {fallback_count}")


def _render_candidate(repository: CandidateRepository, c: StoredCandidate) -> None:
    st.markdown("---")
    col_a, col_b = st.columns([3, 1])
    with col_a:
        st.markdown(f"### {c.name}")
        st.caption(f"**Position:** {c.position} · **Experience:** {c.experience} years · **Email:** {c.email}")
        badges = " ".join(f"`{s}`" for s in c.skills[:12])
        if badges:
            st.markdown(badges)
        if c.education:
            st.caption(f"Education: {c.education}")
    with col_b:
        st.metric("Score", c.overall_score)
        if c.score_source == "fallback":
            st.caption("⚠️ Fallback estimate")
        new_status = st.selectbox(
            "Status",
            options=CANDIDATE_STATUSES,
            index=CANDIDATE_STATUSES.index(c.status) if c.status in CANDIDATE_STATUSES else 0,
            key=f"status_{c.id}",
        )
        if new_status != c.status:
            repository.update_candidate(c.id, status=new_status)
            st.rerun()


def render_layout() -> None:
    """Streamlit page layout; filters and display use services layer."""
    st.set_page_config(page_title="Talent Intake", layout="wide")
    st.title("Talent Intake")
    st.markdown(f"*Import candidates from CSV or resumes. Evaluation provider: `{EVALUATION_PROVIDER}`.*")
    st.divider()

    repository = get_repository()
    _render_upload(_get_orchestrator(repository))

    uploads = repository.list_upload_entries()
    if uploads:
        with st.expander("Upload history"):
            for u in reversed(uploads):
                st.markdown(
                    f"- `{u.filename}` ({u.upload_type}) · {u.candidates_count} candidates · "
                    f"{u.uploaded_date:%Y-%m-%d %H:%M} UTC"
                )

    st.divider()
    candidates = repository.list_candidates()

    # ----- Filter section -----
    st.subheader("Candidates")
    fcol1, fcol2, fcol3 = st.columns([3, 1, 1])
    with fcol1:
        term = st.text_input("Search", placeholder="Search by name, email, or position...", key="search")
    with fcol2:
        status = st.selectbox("Status", options=STATUS_FILTER_OPTIONS, index=0, key="status_filter")
    with fcol3:
        min_score = st.slider("Min score", min_value=0, max_value=100, value=0, key="min_score")
    filtered = filter_by_min_score(
        filter_by_status(search_candidates(candidates, term), status), min_score or None
    )

    if not candidates:
        st.info("Upload a CSV or a resume to add candidates.")
        return

    _render_analytics(candidates)
    st.markdown(f"**Total:** {len(candidates)} · **Shown:** {len(filtered)}")
    st.download_button(
        "Export to CSV",
        data=_export_csv(filtered),
        file_name="candidates.csv",
        mime="text/csv",
        key="export_csv",
    )
    if not filtered:
        st.warning("No candidates match. Try adjusting your filters.")
    for c in filtered:
        _render_candidate(repository, c)


if __name__ == "__main__":
    render_layout()
