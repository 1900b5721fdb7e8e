"""Shared NiceGUI helpers for the question and chat pages."""

from collections.abc import Callable

from nicegui import events, ui

from src.models.schemas import Notice, UploadedFile

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #f5f5f5; min-height: 100vh; }

    .app-container {
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
        overflow: hidden;
    }

    .header { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); }

    .message-user {
        background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
        color: white;
        border-radius: 18px 18px 4px 18px;
    }

    .message-assistant {
        background: #f3f4f6;
        color: #1f2937;
        border-radius: 18px 18px 18px 4px;
    }

    .avatar-user { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); }
    .avatar-assistant { background: #6b7280; }

    .typing-dot {
        width: 8px; height: 8px;
        background: #667eea;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }

    .result-text { white-space: pre-wrap; }

    .send-btn { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%) !important; }
</style>
"""


def notify_user(notice: Notice) -> None:
    """Show a notice as a NiceGUI toast."""
    ui.notify(notice.title, caption=notice.description, type=notice.variant)


async def read_uploads(e: events.MultiUploadEventArguments) -> list[UploadedFile]:
    """Read every file of a multi-upload event into memory."""
    return [
        UploadedFile.from_bytes(f.name, await f.read(), f.content_type)
        for f in e.files
    ]


def pdf_upload(
    on_batch: Callable[[list[UploadedFile]], object],
    label: str = "Choose PDFs",
) -> ui.upload:
    """Multi-file picker restricted to .pdf in the browser dialog.

    The dialog filter is advisory; batches still go through the PDF filter.
    """
    async def handle(e: events.MultiUploadEventArguments) -> None:
        on_batch(await read_uploads(e))
        upload.reset()

    upload = (
        ui.upload(label=label, multiple=True, auto_upload=True, on_multi_upload=handle)
        .props('accept=".pdf" flat bordered')
        .classes("w-full")
    )
    return upload


def render_avatar(is_user: bool) -> None:
    css = "avatar-user" if is_user else "avatar-assistant"
    icon = "person" if is_user else "smart_toy"
    avatar_classes = f"w-9 h-9 rounded-full flex items-center justify-center {css}"
    with ui.element("div").classes(avatar_classes):
        ui.icon(icon).classes("text-white text-lg")
