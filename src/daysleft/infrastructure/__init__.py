"""Infrastructure layer — rendering targets backed by files.

This layer depends on stdlib and third-party libs (BeautifulSoup).
It must never import from services, commands, or output.
"""
