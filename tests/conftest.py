"""Shared fixtures: render contexts and sample data snapshots."""

from __future__ import annotations

import pytest

from rink.tui.config import Config, DisplayConfig, RenderContext
from rink.tui.models import Boxscore, ClubStats, GameSummary, PlayerLanding, Standing
from rink.tui.state import AppState, SystemState


# ---------------------------------------------------------------------------
# Render contexts
# ---------------------------------------------------------------------------


@pytest.fixture
def ctx() -> RenderContext:
    return RenderContext(DisplayConfig())


@pytest.fixture
def ascii_ctx() -> RenderContext:
    return RenderContext(DisplayConfig(use_unicode=False))


@pytest.fixture
def themed_ctx() -> RenderContext:
    return RenderContext(DisplayConfig(theme_name="orange"))


# ---------------------------------------------------------------------------
# Sample data
# ---------------------------------------------------------------------------


@pytest.fixture
def games() -> list[GameSummary]:
    return [
        GameSummary.model_validate(
            {
                "id": 2024020001,
                "gameDate": "2024-10-12",
                "startTimeUTC": "2024-10-12T23:00:00Z",
                "gameState": "FINAL",
                "awayTeam": {"id": 10, "abbrev": "TOR", "commonName": "Maple Leafs", "score": 3},
                "homeTeam": {"id": 6, "abbrev": "BOS", "commonName": "Bruins", "score": 2},
                "periodType": "REG",
            }
        ),
        GameSummary.model_validate(
            {
                "id": 2024020002,
                "gameDate": "2024-10-12",
                "startTimeUTC": "2024-10-13T00:30:00Z",
                "gameState": "FUT",
                "awayTeam": {"id": 3, "abbrev": "NYR", "commonName": "Rangers"},
                "homeTeam": {"id": 5, "abbrev": "PIT", "commonName": "Penguins"},
            }
        ),
    ]


@pytest.fixture
def boxscore() -> Boxscore:
    return Boxscore.model_validate(
        {
            "id": 2024020001,
            "gameDate": "2024-10-12",
            "startTimeUTC": "2024-10-12T23:00:00Z",
            "gameState": "FINAL",
            "periodType": "REG",
            "venue": "Scotiabank Arena",
            "awayTeam": {"id": 10, "abbrev": "TOR", "commonName": "Maple Leafs", "score": 3, "sog": 30},
            "homeTeam": {"id": 6, "abbrev": "BOS", "commonName": "Bruins", "score": 2, "sog": 25},
            "playerByGameStats": {
                "awayTeam": {
                    "forwards": [
                        {
                            "playerId": 8479318,
                            "sweaterNumber": 34,
                            "name": "A. Matthews",
                            "position": "C",
                            "goals": 2,
                            "points": 2,
                            "toi": "19:02",
                        },
                        {
                            "playerId": 8478483,
                            "sweaterNumber": 16,
                            "name": "M. Marner",
                            "position": "R",
                            "assists": 1,
                            "points": 1,
                        },
                    ],
                    "defense": [
                        {"playerId": 8476853, "sweaterNumber": 44, "name": "M. Rielly", "position": "D"},
                    ],
                    "goalies": [
                        {
                            "playerId": 8479361,
                            "sweaterNumber": 60,
                            "name": "J. Woll",
                            "decision": "W",
                            "starter": True,
                            "shotsAgainst": 25,
                            "goalsAgainst": 2,
                            "saves": 23,
                            "savePctg": 0.92,
                        },
                    ],
                },
                "homeTeam": {
                    "forwards": [
                        {
                            "playerId": 8477956,
                            "sweaterNumber": 88,
                            "name": "D. Pastrnak",
                            "position": "R",
                            "goals": 1,
                            "points": 1,
                        },
                    ],
                    "defense": [],
                    "goalies": [
                        {
                            "playerId": 8480280,
                            "sweaterNumber": 1,
                            "name": "J. Swayman",
                            "decision": "L",
                            "starter": True,
                        },
                    ],
                },
            },
        }
    )


@pytest.fixture
def standings() -> list[Standing]:
    rows = [
        ("TOR", "Toronto Maple Leafs", "Eastern", "Atlantic", 8, 5, 2, 0, 10, 25, 20),
        ("BOS", "Boston Bruins", "Eastern", "Atlantic", 9, 6, 3, 0, 12, 28, 22),
        ("EDM", "Edmonton Oilers", "Western", "Pacific", 8, 4, 4, 0, 8, 20, 24),
        ("VAN", "Vancouver Canucks", "Western", "Pacific", 7, 4, 3, 0, 8, 22, 21),
    ]
    return [
        Standing.model_validate(
            {
                "teamAbbrev": abbrev,
                "teamName": name,
                "conferenceName": conference,
                "divisionName": division,
                "gamesPlayed": gp,
                "wins": w,
                "losses": l,
                "otLosses": ot,
                "points": pts,
                "goalFor": gf,
                "goalAgainst": ga,
            }
        )
        for abbrev, name, conference, division, gp, w, l, ot, pts, gf, ga in rows
    ]


@pytest.fixture
def club_stats() -> ClubStats:
    return ClubStats.model_validate(
        {
            "season": "20242025",
            "skaters": [
                {
                    "playerId": 8476853,
                    "firstName": "Morgan",
                    "lastName": "Rielly",
                    "sweaterNumber": 44,
                    "positionCode": "D",
                    "gamesPlayed": 8,
                    "goals": 1,
                    "assists": 3,
                    "points": 4,
                },
                {
                    "playerId": 8478483,
                    "firstName": "Mitch",
                    "lastName": "Marner",
                    "sweaterNumber": 16,
                    "positionCode": "R",
                    "gamesPlayed": 8,
                    "goals": 3,
                    "assists": 7,
                    "points": 10,
                },
                {
                    "playerId": 8479318,
                    "firstName": "Auston",
                    "lastName": "Matthews",
                    "sweaterNumber": 34,
                    "positionCode": "C",
                    "gamesPlayed": 8,
                    "goals": 6,
                    "assists": 4,
                    "points": 10,
                    "plusMinus": 3,
                },
            ],
            "goalies": [
                {
                    "playerId": 8478007,
                    "firstName": "Anthony",
                    "lastName": "Stolarz",
                    "sweaterNumber": 41,
                    "gamesPlayed": 3,
                    "wins": 2,
                    "losses": 1,
                },
                {
                    "playerId": 8479361,
                    "firstName": "Joseph",
                    "lastName": "Woll",
                    "sweaterNumber": 60,
                    "gamesPlayed": 5,
                    "wins": 3,
                    "losses": 2,
                    "goalsAgainstAverage": 2.41,
                    "savePercentage": 0.915,
                },
            ],
        }
    )


@pytest.fixture
def player_landing() -> PlayerLanding:
    return PlayerLanding.model_validate(
        {
            "playerId": 8471675,
            "firstName": "Sidney",
            "lastName": "Crosby",
            "sweaterNumber": 87,
            "position": "C",
            "currentTeamAbbrev": "PIT",
            "birthDate": "1987-08-07",
            "birthCity": "Cole Harbour",
            "heightInInches": 71,
            "weightInPounds": 200,
            "shootsCatches": "L",
            "seasonTotals": [
                {
                    "season": 20042005,
                    "teamName": "Rimouski",
                    "leagueAbbrev": "QMJHL",
                    "gameTypeId": 2,
                    "gamesPlayed": 62,
                    "goals": 66,
                    "assists": 102,
                    "points": 168,
                },
                {
                    "season": 20052006,
                    "teamName": "Pittsburgh Penguins",
                    "leagueAbbrev": "NHL",
                    "gameTypeId": 2,
                    "gamesPlayed": 81,
                    "goals": 39,
                    "assists": 63,
                    "points": 102,
                    "plusMinus": -20,
                },
                {
                    "season": 20062007,
                    "teamName": "Pittsburgh Penguins",
                    "leagueAbbrev": "NHL",
                    "gameTypeId": 3,
                    "gamesPlayed": 5,
                    "goals": 3,
                },
            ],
        }
    )


@pytest.fixture
def app_state(games, standings) -> AppState:
    state = AppState(system=SystemState(config=Config()))
    state.data.game_date = "2024-10-12"
    state.data.games = games
    state.data.standings = standings
    return state
