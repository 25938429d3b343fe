"""
Terminal-facing services for the snake game.
"""
