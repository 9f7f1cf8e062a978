"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.
"""

APP_CSS = """
/* ============================================
   Main Screen Layout - sidebar + conversation
   ============================================ */
Screen {
    layout: grid;
    grid-size: 2 2;
    grid-columns: 1fr 3fr;
    grid-rows: 1fr auto;
    background: $background;
}

/* ============================================
   Sidebar - learning paths + log
   ============================================ */
#sidebar {
    height: 100%;
    padding: 0;
}

#learning-paths {
    height: 1fr;
    background: $panel;
    border: round $accent 60%;
    border-title-color: $accent;
    border-title-style: bold;
    padding: 0 1;

    &:focus-within {
        border: round $accent;
    }
}

.learning-path {
    width: 100%;
    margin: 0 0 1 0;
}

#debug-panel {
    height: auto;
    min-height: 6;
    max-height: 14;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    overflow-y: scroll;
    scrollbar-gutter: stable;
    margin-top: 1;
}

/* ============================================
   Conversation column
   ============================================ */
#conversation {
    height: 100%;
}

#chat-history {
    height: 1fr;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus-within {
        border: round $primary;
    }
}

#composing {
    height: 1;
    padding: 0 2;
    color: $text-muted;
}

#jump-latest {
    dock: bottom;
    width: auto;
    min-width: 22;
    margin: 0 2;
    background: $primary;
    color: $background;
    text-style: bold;
}

/* ============================================
   Bottom Bar - Input
   ============================================ */
#bottom-bar {
    column-span: 2;
    height: auto;
    padding: 1;
    background: $panel;
    border-top: solid $border;
}

ChatInputBar {
    height: 5;
    border: round $primary 60%;
    background: $panel;

    &:focus-within {
        border: round $primary;
    }
}

#chat-input {
    width: 1fr;
    border: none;
    background: transparent;
}

#send-btn {
    width: 10;
    min-width: 8;
    margin: 0 0 0 1;
    border: tall $success;
    background: $success;
    color: $background;
    text-style: bold;

    &:hover {
        background: $success-lighten-1;
    }
}

/* ============================================
   Chat Messages
   ============================================ */
.chat-message {
    width: 100%;
    height: auto;
    margin: 0 0 1 0;
    padding: 1 2;
    background: transparent;
}

.user-message {
    border-left: tall $success;
    background: $success 8%;

    & .message-header {
        color: $success;
        text-style: bold;
    }
}

.assistant-message {
    border-left: tall $secondary;
    background: $secondary 8%;

    & .message-header {
        color: $secondary;
        text-style: bold;
    }
}

.message-header {
    height: auto;
}

.message-content {
    height: auto;
    margin: 0;
    padding: 0;
}

.suggestions {
    height: auto;
    margin-top: 1;
}

.suggestion-chip {
    min-width: 10;
    height: 3;
    margin: 0 1 0 0;
    border: round $secondary 60%;
    background: transparent;

    &:hover {
        background: $secondary 20%;
    }
}

/* ============================================
   Notification Toasts
   ============================================ */
Toast {
    background: $surface;
    border: tall $border;
    padding: 0 1;
}
"""
