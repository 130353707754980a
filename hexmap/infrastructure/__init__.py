"""Infrastructure concerns shared by hexmap entry points."""
