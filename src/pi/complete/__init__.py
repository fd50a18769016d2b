"""pi-complete: token completion with a multi-column candidate picker."""

# Candidates and prefix reduction
from pi.complete.candidates import (
    Candidate,
    StyledText,
    common_prefix,
    longest_common_prefix,
)

# Completer chain
from pi.complete.completers import Completer, CompleterChain

# Completion mode and commands
from pi.complete.completion import (
    CompletionMode,
    accept_completion,
    cancel_completion,
    complete_prefix_or_start_completion,
    cycle_cand_right,
    default_completion,
    select_cand_down,
    select_cand_left,
    select_cand_right,
    select_cand_up,
    start_completion,
)

# Editor interface
from pi.complete.context import EditorContext
from pi.complete.editor import InsertMode, LineEditor

# Grid layout
from pi.complete.grid import (
    GridShape,
    RenderedBlock,
    cell_index,
    cell_position,
    find_window,
    grid_shape,
    render_grid,
)

# Keybindings
from pi.complete.keybindings import (
    DEFAULT_COMPLETION_KEYBINDINGS,
    CompletionAction,
    CompletionKeybindingsManager,
)
from pi.complete.keys import Key, KeyId, matches_key

# Modes
from pi.complete.mode import Mode, make_mode_line

# Settings
from pi.complete.settings import CompletionSettings, SettingsError, load_settings

# Built-in completers
from pi.complete.strategies import (
    complete_command,
    complete_filename,
    complete_variable,
    default_completers,
)

# Tokens
from pi.complete.tokens import INVALID_TOKEN, Token, Word, token_at_cursor, tokenize

# Utilities
from pi.complete.utils import force_width, visible_width

__all__ = [
    # Candidates
    "Candidate",
    "StyledText",
    "common_prefix",
    "longest_common_prefix",
    # Completers
    "Completer",
    "CompleterChain",
    # Completion
    "CompletionMode",
    "accept_completion",
    "cancel_completion",
    "complete_prefix_or_start_completion",
    "cycle_cand_right",
    "default_completion",
    "select_cand_down",
    "select_cand_left",
    "select_cand_right",
    "select_cand_up",
    "start_completion",
    # Editor
    "EditorContext",
    "InsertMode",
    "LineEditor",
    # Grid
    "GridShape",
    "RenderedBlock",
    "cell_index",
    "cell_position",
    "find_window",
    "grid_shape",
    "render_grid",
    # Keybindings
    "DEFAULT_COMPLETION_KEYBINDINGS",
    "CompletionAction",
    "CompletionKeybindingsManager",
    "Key",
    "KeyId",
    "matches_key",
    # Modes
    "Mode",
    "make_mode_line",
    # Settings
    "CompletionSettings",
    "SettingsError",
    "load_settings",
    # Strategies
    "complete_command",
    "complete_filename",
    "complete_variable",
    "default_completers",
    # Tokens
    "INVALID_TOKEN",
    "Token",
    "Word",
    "token_at_cursor",
    "tokenize",
    # Utilities
    "force_width",
    "visible_width",
]
