"""Load, compile, run and inspect small programming exercises, with worked examples."""

__version__ = "5.3.0"