"""NiceGUI chat page with incremental rendering of streamed replies."""

from nicegui import ui

from src.agent.chat_agent import ChatService
from src.agent.config import SUGGESTED_PROMPTS, get_chat_config
from src.models.schemas import Message, Role
from src.ui.formatting import escape_html, markdown_to_html
from src.ui.state import ChatState

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #1f2937; color: #f9fafb; min-height: 100vh; }

    .header { background: #111827; border-bottom: 1px solid #374151; }

    .message-user {
        background: #2563eb;
        color: white;
        border-radius: 18px 18px 4px 18px;
    }

    .message-model {
        background: #374151;
        color: #f3f4f6;
        border-radius: 18px 18px 18px 4px;
    }

    .avatar-user { background: #2563eb; }
    .avatar-model { background: linear-gradient(135deg, #4285f4 0%, #9b72cb 100%); }

    .typing-dot {
        width: 8px; height: 8px;
        background: #9ca3af;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }

    .input-box {
        background: #374151;
        border: 1px solid #4b5563;
        border-radius: 12px;
        transition: border-color 0.2s;
    }
    .input-box:focus-within { border-color: #60a5fa; }

    .prompt-card {
        background: #374151;
        border: 1px solid #4b5563;
        border-radius: 12px;
        cursor: pointer;
    }
    .prompt-card:hover { background: #4b5563; }

    .message-model strong { font-weight: 600; }
    .message-model em { font-style: italic; }
    .message-model code { font-family: 'Menlo', 'Monaco', monospace; }
</style>
"""


def build_chat_page(service: ChatService | None = None) -> ChatState:
    """Build the chat page for the current client.

    Args:
        service: Chat service to use. Defaults to the global Gemini service.

    Returns:
        The ChatState driving the page.
    """
    config = get_chat_config()
    ui.add_head_html(CUSTOM_CSS)
    ui.page_title(config.title)

    state = ChatState(service=service)

    messages_container: ui.column
    scroll_area: ui.scroll_area
    error_label: ui.label
    input_field: ui.textarea
    send_btn: ui.button

    # Body of the last rendered model reply; stream increments update only this
    # element as long as no message was added since the last full refresh.
    tail_html: ui.html | None = None
    rendered_count = 0

    def render_avatar(is_user: bool) -> None:
        css = "avatar-user" if is_user else "avatar-model"
        icon = "person" if is_user else "auto_awesome"
        avatar_classes = f"w-9 h-9 rounded-full flex items-center justify-center {css}"
        with ui.element("div").classes(avatar_classes):
            ui.icon(icon).classes("text-white text-lg")

    def render_message(msg: Message) -> ui.html:
        is_user = msg.role is Role.USER
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-model"

        with ui.row().classes(f"w-full {align} gap-3 items-end"):
            if not is_user:
                render_avatar(False)
            with ui.element("div").classes(f"max-w-[75%] px-4 py-3 {bubble}"):
                if is_user:
                    content = escape_html(msg.content).replace("\n", "<br>")
                else:
                    content = markdown_to_html(msg.content)
                marker = "user-message" if is_user else "model-reply"
                body = (
                    ui.html(content, sanitize=False)
                    .classes("text-sm leading-relaxed")
                    .mark(marker)
                )
            if is_user:
                render_avatar(True)
        return body

    def render_typing_indicator() -> None:
        with ui.row().classes("w-full justify-start gap-3 items-end").mark("typing-indicator"):
            render_avatar(False)
            with ui.element("div").classes("message-model px-4 py-3"):
                with ui.row().classes("gap-1 items-center h-5"):
                    for _ in range(3):
                        ui.element("div").classes("typing-dot")

    def render_welcome() -> None:
        with ui.column().classes("w-full items-center justify-center gap-4 py-12"):
            ui.icon("auto_awesome").classes("text-5xl text-sky-400")
            ui.label("How can I help you today?").classes("text-xl text-gray-200")
            with ui.grid(columns=2).classes("w-full max-w-xl gap-3"):
                for prompt in SUGGESTED_PROMPTS:
                    with (
                        ui.element("div")
                        .classes("prompt-card px-4 py-3")
                        .mark("suggested-prompt")
                        .on("click", lambda p=prompt: state.send_message(p))
                    ):
                        ui.label(prompt).classes("text-sm text-gray-200")

    def refresh_messages() -> None:
        nonlocal tail_html, rendered_count
        tail_html = None
        messages_container.clear()
        with messages_container:
            if not state.messages:
                render_welcome()
            last = state.messages[-1] if state.messages else None
            waiting = state.is_loading and last is not None and (
                last.role is Role.USER or not last.content
            )
            # An empty reply is shown as the typing indicator until text arrives
            shown = state.messages[:-1] if waiting and last.role is Role.MODEL else state.messages
            body = None
            for msg in shown:
                body = render_message(msg)
            if waiting:
                render_typing_indicator()
            elif last is not None and last.role is Role.MODEL:
                tail_html = body
        rendered_count = len(state.messages)

    def on_state_change() -> None:
        streaming_into_tail = (
            state.is_loading
            and tail_html is not None
            and rendered_count == len(state.messages)
        )
        if streaming_into_tail:
            tail_html.set_content(markdown_to_html(state.messages[-1].content))
        else:
            refresh_messages()

        error_label.set_text(state.error or "")
        error_label.set_visibility(bool(state.error))
        input_field.set_enabled(not state.is_loading)
        send_btn.set_enabled(not state.is_loading)
        scroll_area.scroll_to(percent=1.0)

    state.on_change = on_state_change

    async def submit() -> None:
        if state.is_loading:
            return
        text = input_field.value or ""
        input_field.value = ""
        await state.send_message(text)

    # === UI Layout ===
    with ui.column().classes("w-full h-screen gap-0").style("height: 100vh"):
        # Header
        with ui.row().classes("w-full header px-5 py-3 items-center justify-between"):
            with ui.row().classes("items-center gap-3"):
                ui.icon("auto_awesome").classes("text-sky-400 text-2xl")
                ui.label(config.title).classes("text-lg font-semibold text-white")
            ui.button("New Chat", icon="add", on_click=state.new_chat).props(
                "flat no-caps color=white"
            ).mark("new-chat")

        # Messages
        with ui.scroll_area().classes("flex-grow w-full") as scroll_area:
            with ui.column().classes("w-full max-w-3xl mx-auto p-5"):
                messages_container = ui.column().classes("w-full gap-4")

        # Input
        with ui.column().classes("w-full p-4 bg-gray-900 border-t border-gray-700 gap-2"):
            error_label = (
                ui.label().classes("w-full text-red-400 text-center text-sm").mark("error")
            )
            error_label.set_visibility(False)
            with ui.row().classes("w-full max-w-3xl mx-auto gap-3 items-end"):
                with ui.element("div").classes("flex-grow input-box px-3 py-2"):
                    input_field = (
                        ui.textarea(placeholder="Type a message...")
                        .props("autogrow borderless dense dark rows=1")
                        .classes("w-full")
                        .mark("message-input")
                        .on("keydown.enter.exact.prevent", submit)
                    )
                send_btn = (
                    ui.button(icon="send", on_click=submit)
                    .props("round unelevated color=primary")
                    .mark("send")
                )

    refresh_messages()
    return state


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    build_chat_page()
