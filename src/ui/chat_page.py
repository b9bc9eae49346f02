"""NiceGUI chat interface bound to a ConversationStore."""

from nicegui import ui

from src.client.store import ConversationStore
from src.models.schemas import Role, Turn
from src.parsing.annotations import extract_citation_url

CUSTOM_CSS = """
<style>
    body { background: #f5f5f5; min-height: 100vh; }

    .app-container {
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
        overflow: hidden;
    }

    .message-user {
        background: #3b82f6;
        color: white;
        border-radius: 18px 18px 4px 18px;
        white-space: pre-wrap;
    }

    .message-assistant {
        background: #f3f4f6;
        color: #1f2937;
        border-radius: 18px 18px 18px 4px;
        white-space: pre-wrap;
    }

    .source-link { color: #6b7280; }
    .source-link:hover { color: #3b82f6; text-decoration: underline; }
</style>
"""


def render_sources(sources: list[str]) -> None:
    """Render citation labels, linking those that embed a URL."""
    with ui.row().classes("gap-2 text-xs"):
        for label in sources:
            url = extract_citation_url(label)
            if url:
                ui.link(label, url, new_tab=True).classes("source-link no-underline")
            else:
                ui.label(label).classes("text-gray-500")


def render_turn(turn: Turn) -> None:
    is_user = turn.role is Role.USER
    align = "justify-end" if is_user else "justify-start"
    bubble = "message-user" if is_user else "message-assistant"

    with ui.row().classes(f"w-full {align}"):
        with ui.column().classes("max-w-[80%] gap-1"):
            ui.label(turn.content).classes(f"px-4 py-2 text-sm {bubble}")
            if turn.sources:
                render_sources(turn.sources)


@ui.page("/")
def chat_page() -> None:
    """Main chat page. Each visit gets its own conversation."""
    ui.add_head_html(CUSTOM_CSS)
    store = ConversationStore()

    scroll_area: ui.scroll_area
    messages_container: ui.column
    input_field: ui.textarea
    send_btn: ui.button

    def refresh_messages() -> None:
        messages_container.clear()
        with messages_container:
            if not store.turns:
                with ui.column().classes("w-full h-64 items-center justify-center"):
                    ui.label("Start a conversation").classes("text-lg text-gray-400")
            for turn in store.turns:
                render_turn(turn)
            if store.is_pending:
                with ui.row().classes("w-full justify-start"):
                    ui.label("Thinking...").classes(
                        "message-assistant px-4 py-2 text-sm text-gray-500 italic"
                    )
        scroll_area.scroll_to(percent=1.0)

    def sync_controls() -> None:
        if store.is_pending:
            input_field.disable()
            send_btn.disable()
            send_btn.set_text("Sending...")
        else:
            input_field.enable()
            send_btn.enable()
            send_btn.set_text("Send")
        if input_field.value != store.pending_input:
            input_field.value = store.pending_input

    def on_store_change() -> None:
        refresh_messages()
        sync_controls()

    def update_pending_input(value: str | None) -> None:
        store.pending_input = value or ""

    def send_message() -> None:
        if store.is_pending:
            return
        store.start(store.pending_input)

    def new_chat() -> None:
        nonlocal store
        if store.is_pending:
            return
        store = ConversationStore()
        store.subscribe(on_store_change)
        on_store_change()

    # === UI Layout ===
    with ui.column().classes("w-full max-w-2xl mx-auto app-container my-8").style(
        "height: 600px"
    ):
        # Header
        with ui.row().classes("w-full px-5 py-3 items-center justify-between border-b"):
            ui.label("Chat").classes("text-lg font-semibold")
            ui.button(icon="add", on_click=new_chat).props("flat round")

        # Messages
        with ui.scroll_area().classes("flex-grow w-full") as scroll_area:
            messages_container = ui.column().classes("w-full p-4 gap-4")

        # Input
        with ui.row().classes("w-full p-4 gap-2 items-end border-t"):
            input_field = (
                ui.textarea(
                    placeholder="Type your message...",
                    on_change=lambda e: update_pending_input(e.value),
                )
                .props("autogrow outlined dense rows=1")
                .classes("flex-grow")
                .on("keydown.enter.prevent", send_message)
            )
            send_btn = ui.button("Send", on_click=send_message)

    store.subscribe(on_store_change)
    on_store_change()


def main() -> None:
    ui.run(title="Chat", port=8080, reload=False)


if __name__ == "__main__":
    main()
