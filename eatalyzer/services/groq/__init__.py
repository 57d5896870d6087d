from .groq_analysis import GroqAnalysisClient, make_client

__all__ = ["GroqAnalysisClient", "make_client"]
