"""docrepl — wirtualizacja dokumentów dla agentów LLM."""

__version__ = "0.1.0"
