"""Internal helpers not exported from the pathmix facade."""
