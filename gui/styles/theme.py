"""
WordGames theme - colors and typography constants.
"""

# Letter feedback
LETTER_CORRECT = "#2E9E44"    # Right letter, right place
LETTER_PRESENT = "#D9A800"    # Right letter, wrong place
LETTER_ABSENT = "#F0F0F5"     # Not in the word (plain text)

# Text
TEXT_SECONDARY = "#A8A8B8"

# Font families
FONT_MONO = '"JetBrains Mono", "Consolas", "Courier New", monospace'
