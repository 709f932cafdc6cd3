"""Core path resolution building blocks behind the pathmix facade."""
