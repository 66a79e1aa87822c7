"""
Vim Navigation Mixin for row-based views.

Maps arrow keys and vim-style j/k/g/G keys onto a view's cursor movement
methods, so every row-based view shares the same vertical navigation.
"""

from __future__ import annotations


class VimNavigationMixin:
    """Mixin providing vim-style vertical navigation keys.

    The host class must implement ``move_down``, ``move_up``,
    ``move_to_first`` and ``move_to_last``:
    - down/j: Move cursor down
    - up/k: Move cursor up
    - g: Jump to first row
    - G/end: Jump to last row

    Usage:
        class MyView(VimNavigationMixin):
            def handle_key(self, key):
                return self.handle_navigation_key(key)
    """

    VIM_KEYS: dict[str, str] = {
        "down": "move_down",
        "j": "move_down",
        "up": "move_up",
        "k": "move_up",
        "g": "move_to_first",
        "G": "move_to_last",
        "end": "move_to_last",
    }

    def handle_navigation_key(self, key: str) -> bool:
        """Apply a navigation key.

        Args:
            key: Textual key name.

        Returns:
            True if the key moved (or tried to move) the cursor.
        """
        method_name = self.VIM_KEYS.get(key)
        if method_name is None:
            return False
        getattr(self, method_name)()
        return True
