from github_impact.services.github_service import GitHubService
from github_impact.services.language_service import (
    LanguageService,
    aggregate_languages,
    calculate_percentages,
)
from github_impact.services.leaderboard_service import LeaderboardService
from github_impact.services.ranking_service import RankingService
from github_impact.services.scoring_service import ScoringService

__all__ = [
    "GitHubService",
    "LanguageService",
    "LeaderboardService",
    "RankingService",
    "ScoringService",
    "aggregate_languages",
    "calculate_percentages",
]
