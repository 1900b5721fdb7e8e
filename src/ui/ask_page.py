"""NiceGUI single-question page: pick PDFs, ask once, read and copy the answer."""

from nicegui import ui

from src.intake import FileSelection, IntakePolicy
from src.providers import create_answer_provider, get_provider_config
from src.ui.components import CUSTOM_CSS, notify_user, pdf_upload
from src.ui.state import QuestionForm, ResultView


def _files_label(count: int) -> str:
    return f"{count} file{'s' if count != 1 else ''} selected"


@ui.page("/")
def ask_page() -> None:
    """Main question page."""
    ui.add_head_html(CUSTOM_CSS)

    config = get_provider_config()
    form = QuestionForm(create_answer_provider(config, config.provider), notify=notify_user)
    selection = FileSelection(
        IntakePolicy.REJECT_BATCH, on_change=form.set_files, notify=notify_user
    )
    result_view = ResultView(ui.clipboard.write, notify=notify_user)

    async def submit() -> None:
        result_view.show(await form.submit())

    # === UI Layout ===
    with ui.column().classes("w-full max-w-4xl mx-auto p-6 gap-8"):
        # Header
        with ui.column().classes("w-full items-center gap-2"):
            ui.label("Ask PDF").classes("text-3xl font-semibold")
            ui.label(
                "Upload multiple PDF documents and ask questions to get instant, "
                "intelligent answers about their content."
            ).classes("text-lg text-gray-500 text-center max-w-2xl")

        # Form
        with ui.card().classes("w-full p-8 gap-6"):
            ui.label("Select PDF Files").classes("text-sm font-medium")
            with ui.row().classes("w-full items-center gap-4 no-wrap"):
                with ui.element("div").classes("flex-grow"):
                    pdf_upload(selection.add, label="Upload PDF files")
                with ui.row().classes("items-center gap-2 text-sm text-gray-500"):
                    ui.icon("upload")
                    ui.label().bind_text_from(selection, "files", lambda f: _files_label(len(f)))

            ui.label("Ask a Question").classes("text-sm font-medium")
            (
                ui.textarea(placeholder="What would you like to know about your PDF documents?")
                .bind_value(form, "question")
                .props("outlined autogrow")
                .classes("w-full")
            )

            with ui.row().classes("w-full justify-center"):
                (
                    ui.button("Submit Question", on_click=submit)
                    .bind_enabled_from(form, "can_submit")
                    .bind_text_from(
                        form, "loading", lambda busy: "Processing..." if busy else "Submit Question"
                    )
                    .classes("px-8 send-btn text-white")
                )

        # Result
        with ui.card().classes("w-full p-6 gap-4").bind_visibility_from(result_view, "visible"):
            with ui.row().classes("w-full items-center justify-between"):
                ui.label("Analysis Result").classes("text-lg font-semibold")
                ui.button("Copy", icon="content_copy", on_click=result_view.copy).props(
                    "outline size=sm"
                )
            with ui.element("div").classes("w-full bg-gray-50 p-4 rounded-lg border"):
                ui.label().bind_text_from(result_view, "text").classes(
                    "result-text leading-relaxed"
                )
