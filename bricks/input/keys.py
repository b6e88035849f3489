"""Key codes polled by the game session.

Codes follow the browser KeyboardEvent.code names so the session and
tests can refer to keys without importing pygame.
"""

SPACE = 'Space'
ARROW_LEFT = 'ArrowLeft'
ARROW_RIGHT = 'ArrowRight'
