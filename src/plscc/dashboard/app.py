"""
Streamlit shell for the PLS Command Center.

Pages:
- PLS Assistant: chat with the Post-Legislative Scrutiny assistant
- PLS Tool: six-step scrutiny wizard (setup, stakeholders, consultation,
  monitoring, assessment, export)

Talks to the relay server (RELAY_URL); extraction falls back to local
pattern matching and suggestions to canned guidance when it is offline.

Usage:
    streamlit run src/plscc/dashboard/app.py
"""

import sys
from pathlib import Path

# Adds src to the path
src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from dataclasses import replace
from datetime import date, datetime

import pandas as pd
import streamlit as st

from plscc.api import RelayClient
from plscc.config import get_settings
from plscc.errors import PLSError
from plscc.ingest import DocumentReader
from plscc.wizard import (
    CONSULTATION_METHODS,
    INFLUENCE_LEVELS,
    INTEREST_LEVELS,
    ITEM_STATUS_LABELS,
    ITEM_STATUSES,
    JURISDICTION_LEVELS,
    PARLIAMENT_TYPES,
    RATING_LABELS,
    STAKEHOLDER_TYPES,
    STEP_ORDER,
    CannedSuggestionProvider,
    RelaySuggestionProvider,
    WizardState,
    WizardStep,
    build_report,
    next_step,
    previous_step,
    split_lines,
)

st.set_page_config(
    page_title="PLS Command Center",
    page_icon="🏛️",
    layout="wide",
    initial_sidebar_state="expanded",
)


WELCOME_MESSAGE = """Welcome! I'm the **PLS Assistant**, your Post-Legislative Scrutiny expert. I'm here to help you conduct rigorous PLS using WFD methodology.

I can assist you with:
- **Analyzing legislation** - Upload a bill or act for an "X-Ray Scan"
- **Selecting scrutiny lenses** - Gender, Climate, CSO Engagement, or General Effectiveness
- **Guided walkthroughs** - Step-by-step evaluation of your legislation
- **Drafting outputs** - Terms of Reference and PLS Plans

How can I help you today? You can ask me questions or upload a legislative text to begin."""

UPLOAD_TYPES = ["pdf", "docx", "doc", "txt"]


# =============================================================================
# RESOURCES AND SESSION
# =============================================================================

@st.cache_resource
def get_relay_client() -> RelayClient:
    """Relay client (cached)."""
    return RelayClient(get_settings().relay_url)


@st.cache_resource
def get_document_reader() -> DocumentReader:
    """Document reader; Docling loads on first conversion (cached)."""
    return DocumentReader()


@st.cache_data(ttl=30)
def get_relay_status() -> dict:
    return get_relay_client().health_check()


def get_suggestion_provider():
    if get_relay_status().get("status") == "ok":
        return RelaySuggestionProvider(get_relay_client())
    return CannedSuggestionProvider()


def init_session():
    defaults = {
        "wizard": WizardState(),
        "step": WizardStep.SETUP,
        "chat_messages": [{"role": "assistant", "content": WELCOME_MESSAGE}],
        "chat_document": "",
        "document_text": "",
        "extraction": None,
        "suggestions": {},
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def get_state() -> WizardState:
    return st.session_state["wizard"]


def set_state(state: WizardState):
    """Replaces the wizard state wholesale."""
    st.session_state["wizard"] = state


# =============================================================================
# SHARED WIDGETS
# =============================================================================

def render_suggestions(section: str):
    """Suggestion button and the last suggestion for the section."""
    if st.button("💡 Get AI Suggestions", key=f"suggest_{section}"):
        with st.spinner("Generating suggestions..."):
            suggestion = get_suggestion_provider().suggest(section, get_state().context)
        st.session_state["suggestions"][section] = suggestion

    suggestion = st.session_state["suggestions"].get(section)
    if suggestion:
        with st.expander(f"✨ {suggestion.title}", expanded=True):
            st.markdown(suggestion.content)
            if suggestion.tips:
                st.write("**Tips:**")
                for tip in suggestion.tips:
                    st.info(tip)


def render_nav_buttons(step: WizardStep):
    col1, _, col3 = st.columns([1, 4, 1])
    prev = previous_step(step)
    nxt = next_step(step)
    with col1:
        if prev and st.button(f"← {prev.label}", use_container_width=True):
            st.session_state["step"] = prev
            st.rerun()
    with col3:
        if nxt and st.button(f"{nxt.label} →", type="primary", use_container_width=True):
            st.session_state["step"] = nxt
            st.rerun()


def _select_index(options: list[str], value: str) -> int:
    return options.index(value) if value in options else 0


# =============================================================================
# PAGE: PLS ASSISTANT
# =============================================================================

def page_assistant():
    """Chat with the PLS Assistant."""
    st.header("🤖 PLS Assistant")

    with st.sidebar:
        st.subheader("Supporting document")
        uploaded = st.file_uploader("Upload legislation", type=UPLOAD_TYPES, key="chat_upload")
        if uploaded and st.button("Send for X-Ray Scan"):
            try:
                doc = get_document_reader().read_bytes(uploaded.getvalue(), uploaded.name)
            except PLSError as e:
                st.error(e.message)
            else:
                st.session_state["chat_document"] = doc.text
                send_chat_message(
                    f'I\'ve uploaded a legislative document: "{doc.filename}" '
                    f"({doc.char_count:,} characters). Please perform an X-Ray Scan of this legislation."
                )
        if st.session_state["chat_document"]:
            st.caption(f"Document attached ({len(st.session_state['chat_document']):,} characters)")
            if st.button("Remove document"):
                st.session_state["chat_document"] = ""
                st.rerun()

    for message in st.session_state["chat_messages"]:
        with st.chat_message(message["role"]):
            st.markdown(message["content"])

    prompt = st.chat_input("Ask about post-legislative scrutiny...")
    if prompt:
        send_chat_message(prompt)


def send_chat_message(content: str):
    messages = st.session_state["chat_messages"] + [{"role": "user", "content": content}]
    st.session_state["chat_messages"] = messages

    with st.spinner("Thinking..."):
        reply = get_relay_client().chat(
            messages,
            document_text=st.session_state["chat_document"] or None,
            context=get_state().context.to_dict(),
        )

    if reply.success:
        answer = reply.message
    else:
        answer = f"I'm sorry, I encountered an error: {reply.error}"
    st.session_state["chat_messages"] = messages + [{"role": "assistant", "content": answer}]
    st.rerun()


# =============================================================================
# PLS TOOL: STEPS
# =============================================================================

def step_setup():
    """Context & Setup: upload, extraction and legislation details."""
    st.subheader("📄 Upload Legislation")

    uploaded = st.file_uploader(
        "PDF, Word or plain text",
        type=UPLOAD_TYPES,
        key="setup_upload",
    )
    if uploaded and st.button("🔍 Extract Legislation Details", type="primary"):
        extract_uploaded(uploaded)

    extraction = st.session_state["extraction"]
    if extraction:
        if extraction["method"] == "ai":
            st.success(f"Details extracted from {extraction['filename']} with AI")
        else:
            st.warning(f"Details extracted from {extraction['filename']} with pattern matching")
        if extraction.get("warning"):
            st.caption(extraction["warning"])

        document_text = st.session_state["document_text"]
        if document_text and st.session_state["chat_document"] != document_text:
            if st.button("💬 Attach to PLS Assistant"):
                st.session_state["chat_document"] = document_text
                st.rerun()
        elif document_text:
            st.caption("Document attached to the PLS Assistant")

    st.divider()
    st.subheader("⚙️ Legislation Details")

    ctx = get_state().context
    jurisdictions = [""] + list(JURISDICTION_LEVELS)
    parliament_types = [""] + list(PARLIAMENT_TYPES)

    with st.form("context_form"):
        col1, col2 = st.columns(2)
        with col1:
            country = st.text_input("Country", value=ctx.country)
            jurisdiction = st.selectbox(
                "Jurisdiction Level",
                jurisdictions,
                index=_select_index(jurisdictions, ctx.jurisdiction),
                format_func=lambda v: JURISDICTION_LEVELS.get(v, "Select level..."),
            )
            parliament_type = st.selectbox(
                "Parliament Type",
                parliament_types,
                index=_select_index(parliament_types, ctx.parliament_type),
                format_func=lambda v: PARLIAMENT_TYPES.get(v, "Select type..."),
            )
        with col2:
            title = st.text_input("Legislation Title", value=ctx.legislation_title)
            year = st.text_input("Year Enacted", value=ctx.legislation_year)

        summary = st.text_area("Summary", value=ctx.legislation_summary, height=120)
        objectives = st.text_area("Primary Objectives", value=ctx.primary_objectives, height=120)
        agencies = st.text_area("Implementing Agencies", value=ctx.implementing_agencies, height=80)

        if st.form_submit_button("Save Details"):
            state = get_state()
            set_state(replace(state, context=replace(
                state.context,
                country=country,
                jurisdiction=jurisdiction,
                parliament_type=parliament_type,
                legislation_title=title,
                legislation_year=year,
                legislation_summary=summary,
                primary_objectives=objectives,
                implementing_agencies=agencies,
            )))
            st.success("Details saved")


def extract_uploaded(uploaded):
    with st.spinner("Reading document..."):
        try:
            doc = get_document_reader().read_bytes(uploaded.getvalue(), uploaded.name)
        except PLSError as e:
            st.error(e.message)
            return

    if len(doc.text.strip()) < get_settings().min_document_chars:
        st.error("Could not extract enough text from the document. Please try a different file format.")
        return

    with st.spinner("Analyzing legislation..."):
        result, warning = get_relay_client().extract_with_fallback(doc.text, doc.filename)

    st.session_state["document_text"] = doc.text
    st.session_state["extraction"] = {
        "filename": doc.filename,
        "method": result.method.value,
        "warning": warning,
    }
    set_state(get_state().apply_extraction(result))
    st.rerun()


def step_stakeholders():
    """Stakeholder Mapping: influence/interest matrix."""
    state = get_state()

    with st.form("stakeholder_form", clear_on_submit=True):
        col1, col2 = st.columns(2)
        with col1:
            name = st.text_input("Stakeholder Name")
            stype = st.selectbox("Type", [""] + list(STAKEHOLDER_TYPES))
        with col2:
            influence = st.selectbox(
                "Influence", list(INFLUENCE_LEVELS), index=1, format_func=INFLUENCE_LEVELS.get,
            )
            interest = st.selectbox(
                "Interest", list(INTEREST_LEVELS), index=1, format_func=INTEREST_LEVELS.get,
            )
        notes = st.text_input("Notes")
        if st.form_submit_button("Add Stakeholder"):
            stakeholders = state.stakeholders.add(name, stype, influence, interest, notes)
            set_state(replace(state, stakeholders=stakeholders))
            st.rerun()

    if len(state.stakeholders):
        df = pd.DataFrame([
            {"Name": s.name, "Type": s.type, "Influence": s.influence, "Interest": s.interest, "Notes": s.notes}
            for s in state.stakeholders
        ])
        st.dataframe(df, use_container_width=True, hide_index=True)

        by_id = {s.id: s.name for s in state.stakeholders}
        col1, col2 = st.columns([3, 1])
        with col1:
            to_remove = st.selectbox("Remove stakeholder", list(by_id), format_func=by_id.get)
        with col2:
            st.write("")
            if st.button("Remove"):
                set_state(replace(state, stakeholders=state.stakeholders.remove(to_remove)))
                st.rerun()

        st.subheader("Influence / Interest Matrix")
        columns = st.columns(4)
        for column, (quadrant, members) in zip(columns, state.stakeholders.quadrants().items()):
            with column:
                st.write(f"**{quadrant}**")
                for s in members:
                    st.write(f"• {s.name}")
                if not members:
                    st.caption("None")
    else:
        st.info("No stakeholders added yet.")

    render_suggestions(WizardStep.STAKEHOLDERS.value)


def step_consultation():
    """Consultation Design: methods and plan."""
    state = get_state()
    plan = state.consultation

    st.subheader("Consultation Methods")
    columns = st.columns(2)
    for i, method in enumerate(CONSULTATION_METHODS):
        with columns[i % 2]:
            checked = st.checkbox(
                method.label,
                value=method.id in plan.methods,
                help=method.description,
                key=f"method_{method.id}",
            )
            if checked != (method.id in plan.methods):
                set_state(replace(state, consultation=plan.toggle_method(method.id)))
                st.rerun()

    with st.form("consultation_form"):
        target_groups = st.text_area("Target Groups (one per line)", value="\n".join(plan.target_groups))
        timeline = st.text_input("Timeline", value=plan.timeline)
        key_questions = st.text_area("Key Questions", value=plan.key_questions)
        accessibility = st.text_area("Accessibility Measures", value=plan.accessibility_measures)
        if st.form_submit_button("Save Plan"):
            set_state(replace(state, consultation=replace(
                plan,
                target_groups=split_lines(target_groups),
                timeline=timeline,
                key_questions=key_questions,
                accessibility_measures=accessibility,
            )))
            st.success("Consultation plan saved")

    render_suggestions(WizardStep.CONSULTATION.value)


def _tracked_list(kind: str, title: str, with_status: bool = True):
    state = get_state()
    items = getattr(state.monitoring, kind)

    st.write(f"**{title}**")
    col1, col2 = st.columns([4, 1])
    with col1:
        text = st.text_input(f"Add {title.lower()}", key=f"new_{kind}", label_visibility="collapsed")
    with col2:
        if st.button("Add", key=f"add_{kind}"):
            set_state(replace(state, monitoring=state.monitoring.add_item(kind, text)))
            st.rerun()

    for item in items:
        col1, col2 = st.columns([4, 1])
        with col1:
            st.write(item.text)
        if with_status:
            with col2:
                status = st.selectbox(
                    "Status",
                    list(ITEM_STATUSES),
                    index=ITEM_STATUSES.index(item.status),
                    format_func=ITEM_STATUS_LABELS.get,
                    key=f"status_{item.id}",
                    label_visibility="collapsed",
                )
                if status != item.status:
                    set_state(replace(state, monitoring=state.monitoring.update_status(kind, item.id, status)))
                    st.rerun()


def step_monitoring():
    """Implementation Tracking: secondary legislation, milestones, indicators."""
    state = get_state()

    counts = state.monitoring.status_counts()
    columns = st.columns(len(counts))
    for column, (status, count) in zip(columns, counts.items()):
        column.metric(ITEM_STATUS_LABELS[status], count)

    st.divider()
    _tracked_list("secondary_legislation", "Secondary Legislation")
    st.divider()
    _tracked_list("implementation_milestones", "Implementation Milestones")
    st.divider()
    _tracked_list("data_indicators", "Data Indicators", with_status=False)
    st.divider()

    with st.form("review_form"):
        review = st.text_area("Review Clauses", value=get_state().monitoring.review_clauses)
        if st.form_submit_button("Save"):
            state = get_state()
            set_state(replace(state, monitoring=replace(state.monitoring, review_clauses=review)))
            st.success("Review clauses saved")

    render_suggestions(WizardStep.MONITORING.value)


def step_assessment():
    """Impact Assessment: outcomes, rating and evidence."""
    state = get_state()
    assessment = state.assessment

    with st.form("assessment_form"):
        outcomes = st.text_area("Intended Outcomes", value=assessment.intended_outcomes)
        consequences = st.text_area("Unintended Consequences", value=assessment.unintended_consequences)
        rating = st.select_slider(
            "Overall Effectiveness Rating",
            options=list(RATING_LABELS),
            value=assessment.effectiveness_rating,
            format_func=lambda r: f"{r} - {RATING_LABELS[r]}",
        )
        recommendations = st.text_area("Recommendations", value=assessment.recommendations)
        sources = st.text_area("Evidence Sources (one per line)", value="\n".join(assessment.evidence_sources))
        if st.form_submit_button("Save Assessment"):
            set_state(replace(state, assessment=replace(
                assessment,
                intended_outcomes=outcomes,
                unintended_consequences=consequences,
                effectiveness_rating=rating,
                recommendations=recommendations,
                evidence_sources=split_lines(sources),
            )))
            st.success("Assessment saved")

    render_suggestions(WizardStep.ASSESSMENT.value)


def step_export():
    """Export Report: preview and downloads."""
    st.write(
        "Compile your work into a structured Post-Legislative Scrutiny report "
        "that can be shared with your committee."
    )
    report = build_report(get_state(), date.today())

    col1, col2 = st.columns(2)
    with col1:
        st.download_button(
            "⬇️ Download HTML",
            report.to_html(),
            file_name="pls_report.html",
            mime="text/html",
            use_container_width=True,
        )
    with col2:
        st.download_button(
            "⬇️ Download Markdown",
            report.to_markdown(),
            file_name="pls_report.md",
            mime="text/markdown",
            use_container_width=True,
        )

    st.divider()
    st.markdown(report.to_markdown())


STEP_PAGES = {
    WizardStep.SETUP: step_setup,
    WizardStep.STAKEHOLDERS: step_stakeholders,
    WizardStep.CONSULTATION: step_consultation,
    WizardStep.MONITORING: step_monitoring,
    WizardStep.ASSESSMENT: step_assessment,
    WizardStep.EXPORT: step_export,
}


def page_tool():
    """Six-step PLS wizard."""
    step = st.session_state["step"]

    chosen = st.radio(
        "Step",
        STEP_ORDER,
        index=STEP_ORDER.index(step),
        format_func=lambda s: f"{s.number}. {s.label}",
        horizontal=True,
        label_visibility="collapsed",
    )
    if chosen != step:
        st.session_state["step"] = chosen
        st.rerun()

    st.header(f"{step.number}. {step.label}")
    STEP_PAGES[step]()
    st.divider()
    render_nav_buttons(step)


# =============================================================================
# MAIN
# =============================================================================

def main():
    init_session()

    st.sidebar.title("🏛️ PLS Command Center")
    st.sidebar.caption("Legislative Scrutiny Sandbox")

    page = st.sidebar.radio("Navigation", ["PLS Assistant", "PLS Tool"])

    st.sidebar.divider()
    status = get_relay_status()
    if status.get("status") == "ok":
        st.sidebar.success("Relay: online" + (" (AI enabled)" if status.get("aiConfigured") else " (no API key)"))
    else:
        st.sidebar.warning("Relay: offline, using pattern matching")

    ctx = get_state().context
    if ctx.legislation_title:
        st.sidebar.write(f"**{ctx.legislation_title}**")
        st.sidebar.caption(" • ".join(p for p in (ctx.country, ctx.legislation_year) if p))

    st.sidebar.caption(f"Updated: {datetime.now().strftime('%H:%M:%S')}")

    if page == "PLS Assistant":
        page_assistant()
    elif page == "PLS Tool":
        page_tool()


if __name__ == "__main__":
    main()
