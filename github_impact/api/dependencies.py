from fastapi import Depends, Request

from github_impact.services.github_service import GitHubService
from github_impact.services.language_service import LanguageService
from github_impact.services.leaderboard_service import LeaderboardService
from github_impact.services.ranking_service import RankingService
from github_impact.services.scoring_service import ScoringService


def get_github_service(request: Request) -> GitHubService:
    return request.app.state.github


def get_leaderboard(request: Request) -> LeaderboardService:
    return request.app.state.leaderboard


def get_scoring_service() -> ScoringService:
    return ScoringService()


def get_ranking_service(
    github: GitHubService = Depends(get_github_service),
    leaderboard: LeaderboardService = Depends(get_leaderboard),
    scoring: ScoringService = Depends(get_scoring_service),
) -> RankingService:
    return RankingService(github, leaderboard, scoring)


def get_language_service(
    github: GitHubService = Depends(get_github_service),
) -> LanguageService:
    return LanguageService(github)
