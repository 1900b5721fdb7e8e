"""NiceGUI chat page: upload PDFs, then ask questions turn by turn."""

from nicegui import ui

from src.intake import FileSelection, IntakePolicy, format_file_size
from src.models.schemas import Message, MessageRole
from src.providers import create_answer_provider, get_provider_config
from src.ui.components import CUSTOM_CSS, notify_user, pdf_upload, render_avatar
from src.ui.state import ChatSession


@ui.page("/chat")
def chat_page() -> None:
    """Chat page with document upload."""
    ui.add_head_html(CUSTOM_CSS)

    files_container: ui.column
    messages_container: ui.column
    input_field: ui.input

    def refresh() -> None:
        refresh_files()
        refresh_messages()

    config = get_provider_config()
    session = ChatSession(
        create_answer_provider(config, config.chat_provider),
        notify=notify_user,
        on_change=refresh,
    )
    selection = FileSelection(IntakePolicy.FILTER, on_change=session.set_files, notify=notify_user)

    def render_file(file_id: str, name: str, size: int) -> None:
        with ui.card().classes("w-full px-4 py-3"):
            with ui.row().classes("w-full items-center justify-between no-wrap"):
                with ui.row().classes("items-center gap-3 no-wrap"):
                    ui.icon("description").classes("text-2xl text-indigo-500")
                    with ui.column().classes("gap-0"):
                        ui.label(name).classes("font-medium truncate max-w-64")
                        ui.label(format_file_size(size)).classes("text-sm text-gray-500")
                ui.button(icon="close", on_click=lambda: selection.remove(file_id)).props(
                    "flat round dense"
                )

    def refresh_files() -> None:
        files_container.clear()
        with files_container:
            if session.files:
                ui.label(f"Uploaded Documents ({len(session.files)})").classes("font-semibold")
                for f in session.files:
                    render_file(f.id, f.name, f.size)

    def render_message(msg: Message) -> None:
        is_user = msg.role is MessageRole.USER
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-assistant"

        with ui.row().classes(f"w-full {align} gap-3 items-end"):
            if not is_user:
                render_avatar(False)
            with ui.column().classes("max-w-[80%] gap-1"):
                with ui.element("div").classes(f"px-4 py-3 {bubble}"):
                    ui.label(msg.content).classes("text-sm leading-relaxed result-text")
                ui.label(msg.timestamp.strftime("%I:%M %p")).classes(
                    f"text-[10px] text-gray-400 {'self-end' if is_user else 'self-start'}"
                )
            if is_user:
                render_avatar(True)

    def render_typing_indicator() -> None:
        with ui.row().classes("w-full justify-start gap-3 items-end"):
            render_avatar(False)
            with ui.element("div").classes("message-assistant px-4 py-3"):
                with ui.row().classes("gap-1"):
                    for _ in range(3):
                        ui.element("div").classes("typing-dot")

    def refresh_messages() -> None:
        messages_container.clear()
        with messages_container:
            if not session.has_documents:
                with ui.column().classes("w-full h-64 items-center justify-center gap-3"):
                    ui.icon("smart_toy").classes("text-5xl text-gray-300")
                    ui.label("Upload PDFs to Start").classes("text-lg font-semibold")
                    ui.label(
                        "Upload your PDF documents above to begin asking questions "
                        "about their content."
                    ).classes("text-gray-400")
                return
            if not session.messages:
                with ui.column().classes("w-full h-64 items-center justify-center gap-3"):
                    ui.icon("forum").classes("text-5xl text-gray-300")
                    ui.label("Start by asking a question about your documents...").classes(
                        "text-gray-400"
                    )
            for msg in session.messages:
                render_message(msg)
            if session.is_pending:
                render_typing_indicator()

    async def send_message() -> None:
        text = input_field.value or ""
        if not session.can_send(text):
            return
        input_field.value = ""
        await session.send(text)

    # === UI Layout ===
    with ui.column().classes("w-full max-w-3xl mx-auto p-4 md:p-8 gap-6"):
        pdf_upload(selection.add, label="Upload PDF Documents")
        files_container = ui.column().classes("w-full gap-2")

        with ui.column().classes("w-full app-container gap-0"):
            with ui.row().classes("w-full header px-5 py-4 items-center gap-3"):
                ui.icon("smart_toy").classes("text-white text-3xl")
                with ui.column().classes("gap-0"):
                    ui.label("AI Assistant").classes("text-lg font-semibold text-white")
                    ui.label("Ask questions about your uploaded documents").classes(
                        "text-xs text-white/80"
                    )

            with ui.scroll_area().classes("w-full h-96 bg-gray-50"):
                messages_container = ui.column().classes("w-full p-5 gap-4")

            input_row = ui.row().classes("w-full p-4 gap-3 items-center bg-white border-t no-wrap")
            with input_row.bind_visibility_from(session, "has_documents"):
                input_field = (
                    ui.input(placeholder="Ask a question about your documents...")
                    .props("outlined dense")
                    .classes("flex-grow")
                    .bind_enabled_from(session, "is_pending", lambda pending: not pending)
                    .on("keydown.enter", send_message)
                )
                (
                    ui.button(icon="send", on_click=send_message)
                    .props("round unelevated")
                    .classes("send-btn")
                    .bind_enabled_from(session, "is_pending", lambda pending: not pending)
                )

    refresh()
