from .acceptance_stats_service import AcceptanceDelta, AcceptanceStatsService

__all__ = ["AcceptanceDelta", "AcceptanceStatsService"]
