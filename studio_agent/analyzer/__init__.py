from studio_agent.analyzer.core import analyze, build_snapshot
from studio_agent.analyzer.summary import format_compact

__all__ = ["analyze", "build_snapshot", "format_compact"]
