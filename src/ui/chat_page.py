"""NiceGUI resume chat interface.

Upload view until a resume is accepted, then a chat view with a suggestions
sidebar. All state lives in ResumeChatController; this page only renders it
and forwards user actions.
"""

import logging

from nicegui import events, ui

from src.client import ResumeApiClient, get_client_config
from src.controller import ResumeChatController
from src.models import ResumeDocument, Role, Turn
from src.ui.formatting import markdown_to_html, plain_to_html

logger = logging.getLogger(__name__)

APP_TITLE = "Resume AI Agent"
ACCEPTED_TYPES = ".pdf,.docx"

FEATURES = (
    ("Interview Prep", "Personalized answers"),
    ("Skills Analysis", "Identify strengths"),
    ("Job Matching", "Compare to roles"),
)

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', system-ui, -apple-system, sans-serif; }

    body { background: #f9fafb; min-height: 100vh; }

    .panel {
        background: white;
        border: 1px solid #e5e7eb;
        border-radius: 12px;
        box-shadow: 0 1px 2px rgba(0, 0, 0, 0.05);
    }

    .upload-box {
        background: white;
        border: 2px dashed #d1d5db;
        border-radius: 16px;
        transition: border-color 0.2s;
    }
    .upload-box:hover { border-color: #60a5fa; }

    .message-user {
        background: #2563eb;
        color: white;
        border-radius: 18px 18px 4px 18px;
    }

    .message-assistant {
        background: #f3f4f6;
        color: #1f2937;
        border-radius: 18px 18px 18px 4px;
    }

    .typing-dot {
        width: 8px; height: 8px;
        background: #2563eb;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }

    .message-assistant strong { font-weight: 600; }
    .message-assistant code { font-family: 'Menlo', 'Monaco', monospace; }
    .message-assistant a { color: #4f46e5; }
</style>
"""


@ui.page("/")
def resume_chat_page() -> None:
    """Main page, one controller per connected browser tab."""
    ui.add_head_html(CUSTOM_CSS)
    config = get_client_config()
    controller = ResumeChatController(ResumeApiClient(config), config)

    upload_view: ui.column
    chat_view: ui.row
    upload_status: ui.label
    uploader: ui.upload
    new_resume_btn: ui.button
    suggestions_container: ui.column
    messages_container: ui.column
    scroll_area: ui.scroll_area
    input_field: ui.textarea
    send_btn: ui.button
    alert_dialog: ui.dialog
    alert_label: ui.label

    def show_alert(message: str) -> None:
        alert_label.set_text(message)
        alert_dialog.open()

    def render_message(turn: Turn) -> None:
        is_user = turn.role is Role.USER
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-assistant"
        content = plain_to_html(turn.text) if is_user else markdown_to_html(turn.text)

        with ui.row().classes(f"w-full {align}"):
            with ui.element("div").classes(f"max-w-[75%] px-5 py-3 {bubble}"):
                ui.html(content, sanitize=False).classes("text-base leading-relaxed")

    def render_typing_indicator() -> None:
        with ui.row().classes("w-full justify-start"):
            with ui.element("div").classes("message-assistant px-5 py-3"):
                with ui.row().classes("gap-1"):
                    for _ in range(3):
                        ui.element("div").classes("typing-dot")

    def render_suggestion_group(title: str, questions: tuple[str, ...]) -> None:
        if not questions:
            return
        ui.label(title).classes("text-sm font-bold text-gray-500 uppercase tracking-wide")
        for question in questions[: config.suggestion_limit]:
            ui.button(question, on_click=lambda q=question: input_field.set_value(q)).props(
                "flat no-caps align=left"
            ).classes("w-full text-left text-gray-700 bg-gray-50 rounded-lg")

    def refresh_suggestions() -> None:
        suggestions_container.clear()
        suggestions = controller.suggestions
        with suggestions_container:
            ui.label("Suggestions").classes("text-xl font-bold text-gray-900")
            if suggestions is None:
                return
            render_suggestion_group("Interview", suggestions.interview)
            render_suggestion_group("Analysis", suggestions.analysis)
            render_suggestion_group("Matching", suggestions.matching)

    def refresh_messages() -> None:
        messages_container.clear()
        with messages_container:
            for turn in controller.turns:
                render_message(turn)
            if controller.is_pending:
                render_typing_indicator()
        scroll_area.scroll_to(percent=1.0)

    def refresh() -> None:
        active = controller.session.is_active
        upload_view.set_visibility(not active)
        chat_view.set_visibility(active)
        new_resume_btn.set_visibility(active)

        upload_status.set_text(
            "Processing your resume..." if controller.is_uploading else "Choose a file or drag here"
        )
        uploader.set_enabled(not controller.is_uploading)
        send_btn.set_enabled(not controller.is_pending)

        refresh_messages()
        refresh_suggestions()

    async def handle_upload(e: events.UploadEventArguments) -> None:
        document = ResumeDocument(
            filename=e.file.name,
            content=await e.file.read(),
            content_type=e.file.content_type,
        )
        error = await controller.upload(document)
        uploader.reset()
        if error is not None:
            show_alert(error.message)

    async def send_message() -> None:
        text = input_field.value or ""
        if not controller.can_ask(text):
            return
        input_field.value = ""
        await controller.ask(text)

    async def start_new_resume() -> None:
        input_field.value = ""
        uploader.reset()
        await controller.new_resume()

    # === UI Layout ===
    with ui.header().classes("bg-white border-b border-gray-200 shadow-sm px-6 py-4"):
        with ui.row().classes("w-full max-w-7xl mx-auto items-center justify-between"):
            ui.label(APP_TITLE).classes("text-3xl font-bold text-gray-900 tracking-tight")
            new_resume_btn = ui.button("New Resume", on_click=start_new_resume).props(
                "flat no-caps color=primary"
            )

    with ui.column().classes("w-full max-w-7xl mx-auto px-6 py-10"):
        # Upload
        with ui.column().classes("w-full max-w-3xl mx-auto items-stretch gap-8") as upload_view:
            with ui.column().classes("w-full items-center gap-2"):
                ui.label("Upload Your Resume").classes("text-5xl font-bold text-gray-900")
                ui.label("Get AI-powered interview prep and career insights").classes(
                    "text-xl text-gray-600"
                )
            with ui.column().classes("upload-box w-full items-center gap-4 p-16"):
                upload_status = ui.label().classes("text-2xl font-bold text-gray-900")
                ui.label("PDF or DOCX • Max 10MB").classes("text-lg text-gray-500")
                uploader = (
                    ui.upload(on_upload=handle_upload, auto_upload=True, max_files=1)
                    .props(f'accept="{ACCEPTED_TYPES}" flat bordered')
                    .classes("w-full max-w-md")
                )
            with ui.row().classes("w-full gap-6 no-wrap"):
                for title, subtitle in FEATURES:
                    with ui.column().classes("panel flex-1 items-center p-6 gap-1"):
                        ui.label(title).classes("text-lg font-bold text-gray-900")
                        ui.label(subtitle).classes("text-base text-gray-600")

        # Chat
        with ui.row().classes("w-full gap-6 no-wrap items-start") as chat_view:
            suggestions_container = ui.column().classes("panel w-72 p-5 gap-3 shrink-0")
            with ui.column().classes("panel flex-grow gap-0").style("height: calc(100vh - 12rem)"):
                with ui.scroll_area().classes("flex-grow w-full") as scroll_area:
                    messages_container = ui.column().classes("w-full gap-4 p-5")
                with ui.row().classes("w-full p-4 gap-3 items-end border-t no-wrap"):
                    input_field = (
                        ui.textarea(placeholder="Ask about your resume...")
                        .props("autogrow outlined dense rows=1")
                        .classes("flex-grow")
                        .on("keydown.enter.prevent", send_message)
                    )
                    send_btn = ui.button("Send", on_click=send_message).props(
                        "unelevated no-caps color=primary"
                    )

    # Upload failure alert, shared by every upload attempt
    with ui.dialog().props("persistent") as alert_dialog, ui.card().classes("items-center gap-4 p-6"):
        ui.icon("error_outline").classes("text-4xl text-red-500")
        alert_label = ui.label().classes("text-base text-gray-800 text-center")
        ui.button("OK", on_click=alert_dialog.close).props("unelevated color=primary")

    unsubscribe = controller.subscribe(refresh)
    ui.context.client.on_disconnect(unsubscribe)
    refresh()
    ui.timer(0.1, controller.load_suggestions, once=True)
