"""NiceGUI chat interface bound to the transcript store."""

import logging

from nicegui import events, ui

from zentro.chat.images import encode_data_url
from zentro.chat.pipeline import ChatController
from zentro.chat.state import ChatState, ChatStore
from zentro.models import Message, Role

logger = logging.getLogger(__name__)

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #fafafa; min-height: 100vh; }

    .app-container {
        background: white;
        border-left: 1px solid #e4e4e7;
        border-right: 1px solid #e4e4e7;
        overflow: hidden;
    }

    .header { border-bottom: 1px solid #f4f4f5; backdrop-filter: blur(8px); }

    .message-user {
        background: #f4f4f5;
        color: #27272a;
        border-radius: 16px 4px 16px 16px;
    }

    .message-assistant {
        background: white;
        border: 1px solid #f4f4f5;
        color: #27272a;
        border-radius: 4px 16px 16px 16px;
    }

    .avatar-user { background: #f4f4f5; color: #52525b; }
    .avatar-assistant { background: #18181b; color: white; }

    .source-chip {
        background: #fafafa;
        border: 1px solid #f4f4f5;
        border-radius: 6px;
        font-size: 10px;
        color: #71717a;
    }
    .source-chip:hover { background: #f4f4f5; color: #18181b; }

    .input-box {
        background: #fafafa;
        border: 1px solid #e4e4e7;
        border-radius: 16px;
        transition: border-color 0.2s;
    }
    .input-box:focus-within { border-color: #18181b; }

    .send-btn { background: #18181b !important; color: white !important; }

    .message-assistant pre { margin: 0.5rem 0; }
    .message-assistant code { font-family: 'Menlo', 'Monaco', monospace; }
</style>
"""

# Plain Enter sends; with Shift held the textarea inserts a newline.
SEND_KEYS = "keydown.enter.exact.prevent"
INPUT_HINT = "Shift + Enter for new line"


def format_time(message: Message) -> str:
    return message.timestamp.strftime("%I:%M %p")


def shows_thinking(state: ChatState, message: Message) -> bool:
    """Whether the message should render as the pending-reply indicator."""
    return state.is_thinking and message is state.messages[-1]


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)
    store = ChatStore()
    controller = ChatController(store)

    # message id -> (message as last rendered, wrapper element)
    rendered: dict[str, tuple[Message, ui.element]] = {}

    scroll_area: ui.scroll_area
    messages_container: ui.column
    preview_box: ui.row
    uploader: ui.upload
    input_field: ui.textarea
    send_btn: ui.button
    stop_btn: ui.button

    def render_avatar(is_user: bool) -> None:
        css = "avatar-user" if is_user else "avatar-assistant"
        icon = "person" if is_user else "smart_toy"
        with ui.element("div").classes(f"w-8 h-8 rounded-lg flex items-center justify-center {css}"):
            ui.icon(icon).classes("text-base")

    def render_status_indicator() -> None:
        with ui.element("div").classes("message-assistant px-4 py-3"):
            with ui.row().classes("items-center gap-2"):
                ui.spinner(size="sm", color="grey")
                ui.label("Thinking...").classes("text-xs text-gray-400 font-medium")

    def render_sources(message: Message) -> None:
        with ui.column().classes("mt-3 pt-3 border-t gap-2"):
            with ui.row().classes("items-center gap-1"):
                ui.icon("public").classes("text-[10px] text-gray-400")
                ui.label("Sources").classes(
                    "text-[10px] font-bold uppercase tracking-wider text-gray-400"
                )
            with ui.row().classes("flex-wrap gap-2"):
                for source in message.sources or ():
                    with ui.link(target=source.uri, new_tab=True).classes(
                        "source-chip px-2 py-1 flex items-center gap-1 no-underline"
                    ):
                        ui.label(source.title).classes("truncate max-w-[120px]")
                        ui.icon("open_in_new").classes("text-[8px]")

    def render_message(message: Message, thinking: bool = False) -> None:
        is_user = message.role is Role.USER
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-assistant"

        with ui.row().classes(f"w-full {align} gap-3 items-start no-wrap"):
            if not is_user:
                render_avatar(False)
            with ui.column().classes("max-w-[80%] gap-2"):
                if message.image:
                    ui.image(message.image).classes("max-w-sm rounded-2xl border shadow-sm")
                if thinking:
                    render_status_indicator()
                else:
                    with ui.element("div").classes(f"px-4 py-3 text-sm shadow-sm {bubble}"):
                        if is_user:
                            ui.label(message.content).classes("whitespace-pre-wrap")
                        else:
                            ui.markdown(message.content).classes("leading-relaxed")
                        if message.sources:
                            render_sources(message)
                        ui.label(format_time(message)).classes(
                            f"text-[10px] mt-2 opacity-40 font-medium "
                            f"{'text-right' if is_user else 'text-left'}"
                        )
            if is_user:
                render_avatar(True)

    def sync_messages(state: ChatState) -> None:
        ids = [msg.id for msg in state.messages]
        if list(rendered) != ids:
            messages_container.clear()
            rendered.clear()
            with messages_container:
                for msg in state.messages:
                    with ui.element("div").classes("w-full") as wrapper:
                        render_message(msg, shows_thinking(state, msg))
                    rendered[msg.id] = (msg, wrapper)
        else:
            # Only replaced messages are re-rendered; untouched ones keep identity.
            for msg in state.messages:
                shown, wrapper = rendered[msg.id]
                if shown is msg:
                    continue
                wrapper.clear()
                with wrapper:
                    render_message(msg, shows_thinking(state, msg))
                rendered[msg.id] = (msg, wrapper)
        scroll_area.scroll_to(percent=1.0)

    def sync_preview(state: ChatState) -> None:
        preview_box.clear()
        if state.pending_image:
            with preview_box, ui.element("div").classes("relative inline-block"):
                ui.image(state.pending_image).classes(
                    "w-20 h-20 rounded-xl border-2 border-black shadow-md"
                ).props("fit=cover")
                ui.button(icon="close", on_click=store.remove_image).props(
                    "round dense size=xs color=black"
                ).classes("absolute -top-2 -right-2")

    def sync_controls(state: ChatState) -> None:
        if (input_field.value or "") != state.draft:
            input_field.value = state.draft
        send_btn.set_enabled(state.can_send)
        send_btn.set_visibility(not state.is_sending)
        stop_btn.set_visibility(state.is_sending)

    previous: ChatState | None = None

    def render(state: ChatState) -> None:
        nonlocal previous
        if previous is None or state.messages is not previous.messages:
            sync_messages(state)
        if previous is None or state.pending_image != previous.pending_image:
            sync_preview(state)
        sync_controls(state)
        previous = state

    async def handle_upload(e: events.UploadEventArguments) -> None:
        content = await e.file.read()
        store.attach_image(encode_data_url(content, e.file.content_type))
        logger.debug(f"Attached image {e.file.name} ({len(content)} bytes)")
        uploader.reset()

    async def send_message() -> None:
        store.set_draft(input_field.value or "")
        await controller.send()

    def clear_chat() -> None:
        controller.clear()

    # === UI Layout ===
    with ui.column().classes("w-full max-w-3xl mx-auto app-container gap-0").style(
        "height: 100vh"
    ):
        # Header
        with ui.row().classes("w-full header px-6 py-4 items-center justify-between"):
            with ui.row().classes("items-center gap-3"):
                with ui.element("div").classes(
                    "w-10 h-10 rounded-xl bg-black flex items-center justify-center shadow-lg"
                ):
                    ui.icon("auto_awesome").classes("text-white text-xl")
                with ui.column().classes("gap-0"):
                    ui.label("Zentro").classes("font-semibold text-gray-900 tracking-tight")
                    ui.label("AI Assistant").classes(
                        "text-[10px] uppercase tracking-wider font-bold text-gray-400"
                    )
            ui.button(icon="delete_outline", on_click=clear_chat).props(
                "flat round color=grey"
            ).tooltip("Clear Chat")

        # Messages
        with ui.scroll_area().classes("flex-grow w-full") as scroll_area:
            messages_container = ui.column().classes("w-full px-4 py-6 gap-6")

        # Input
        with ui.column().classes("w-full p-4 gap-4 border-t"):
            preview_box = ui.row()
            with ui.row().classes("w-full items-end gap-2 no-wrap"):
                uploader = (
                    ui.upload(on_upload=handle_upload, auto_upload=True, max_files=1)
                    .props('accept="image/*"')
                    .classes("hidden")
                )
                ui.button(
                    icon="image", on_click=lambda: uploader.run_method("pickFiles")
                ).props("flat color=grey").tooltip("Upload Image")
                with ui.element("div").classes("flex-grow input-box px-3 py-1"):
                    input_field = (
                        ui.textarea(
                            placeholder="Type your message...",
                            on_change=lambda e: store.set_draft(e.value or ""),
                        )
                        .props("autogrow borderless dense rows=1")
                        .classes("w-full")
                        .on(SEND_KEYS, send_message)
                    )
                send_btn = (
                    ui.button(icon="send", on_click=send_message)
                    .props("unelevated")
                    .classes("send-btn rounded-xl")
                )
                stop_btn = (
                    ui.button(icon="stop", on_click=controller.stop)
                    .props("unelevated color=grey-8")
                    .classes("rounded-xl")
                    .tooltip("Stop")
                )
            ui.label(INPUT_HINT).classes(
                "w-full text-center text-[10px] text-gray-400 font-medium"
            )

    store.subscribe(render)
    render(store.state)
