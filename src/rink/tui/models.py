"""Snapshots of sports data consumed by the documents.

All types use Pydantic models for validation, with camelCase aliases
matching the upstream JSON.  The renderer only reads them.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

GameState = Literal["FUT", "PRE", "LIVE", "CRIT", "FINAL", "OFF", "PPD", "SUSP"]

PeriodType = Literal["REG", "OT", "SO"]


# --- Games ---


class TeamInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int = 0
    abbrev: str
    common_name: str = Field(default="", alias="commonName")
    score: int | None = None
    sog: int | None = None


class GameSummary(BaseModel):
    """One game on the schedule."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    game_date: str = Field(default="", alias="gameDate")
    start_time_utc: str = Field(default="", alias="startTimeUTC")
    game_state: GameState = Field(default="FUT", alias="gameState")
    away_team: TeamInfo = Field(alias="awayTeam")
    home_team: TeamInfo = Field(alias="homeTeam")
    period: int | None = None
    period_type: PeriodType = Field(default="REG", alias="periodType")
    clock: str = ""
    in_intermission: bool = Field(default=False, alias="inIntermission")
    venue: str = ""


# --- Box score ---


class SkaterStats(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    player_id: int = Field(alias="playerId")
    sweater_number: int | None = Field(default=None, alias="sweaterNumber")
    name: str
    position: str = ""
    goals: int = 0
    assists: int = 0
    points: int = 0
    plus_minus: int = Field(default=0, alias="plusMinus")
    pim: int = 0
    hits: int = 0
    power_play_goals: int = Field(default=0, alias="powerPlayGoals")
    sog: int = 0
    faceoff_winning_pctg: float = Field(default=0.0, alias="faceoffWinningPctg")
    toi: str = ""
    blocked_shots: int = Field(default=0, alias="blockedShots")
    shifts: int = 0
    giveaways: int = 0
    takeaways: int = 0

    @property
    def last_name(self) -> str:
        return self.name.split()[-1] if self.name.strip() else self.name


class GoalieStats(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    player_id: int = Field(alias="playerId")
    sweater_number: int | None = Field(default=None, alias="sweaterNumber")
    name: str
    decision: str | None = None
    starter: bool | None = None
    shots_against: int = Field(default=0, alias="shotsAgainst")
    goals_against: int = Field(default=0, alias="goalsAgainst")
    saves: int = 0
    save_pctg: float | None = Field(default=None, alias="savePctg")
    even_strength_shots_against: str = Field(default="", alias="evenStrengthShotsAgainst")
    power_play_shots_against: str = Field(default="", alias="powerPlayShotsAgainst")
    shorthanded_shots_against: str = Field(default="", alias="shorthandedShotsAgainst")
    toi: str = ""
    pim: int | None = None

    @property
    def last_name(self) -> str:
        return self.name.split()[-1] if self.name.strip() else self.name


class TeamPlayerStats(BaseModel):
    forwards: list[SkaterStats] = Field(default_factory=list)
    defense: list[SkaterStats] = Field(default_factory=list)
    goalies: list[GoalieStats] = Field(default_factory=list)


class PlayerByGameStats(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    away_team: TeamPlayerStats = Field(default_factory=TeamPlayerStats, alias="awayTeam")
    home_team: TeamPlayerStats = Field(default_factory=TeamPlayerStats, alias="homeTeam")


class Boxscore(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    game_date: str = Field(default="", alias="gameDate")
    start_time_utc: str = Field(default="", alias="startTimeUTC")
    game_state: GameState = Field(default="FUT", alias="gameState")
    venue: str = ""
    period: int | None = None
    period_type: PeriodType = Field(default="REG", alias="periodType")
    clock: str = ""
    in_intermission: bool = Field(default=False, alias="inIntermission")
    away_team: TeamInfo = Field(alias="awayTeam")
    home_team: TeamInfo = Field(alias="homeTeam")
    player_by_game_stats: PlayerByGameStats = Field(
        default_factory=PlayerByGameStats, alias="playerByGameStats"
    )


# --- Standings ---


class Standing(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    team_abbrev: str = Field(alias="teamAbbrev")
    team_name: str = Field(default="", alias="teamName")
    conference_name: str = Field(default="", alias="conferenceName")
    division_name: str = Field(default="", alias="divisionName")
    games_played: int = Field(default=0, alias="gamesPlayed")
    wins: int = 0
    losses: int = 0
    ot_losses: int = Field(default=0, alias="otLosses")
    points: int = 0
    goal_for: int = Field(default=0, alias="goalFor")
    goal_against: int = Field(default=0, alias="goalAgainst")

    @property
    def goal_differential(self) -> int:
        return self.goal_for - self.goal_against


# --- Team roster season stats ---


class ClubSkaterStats(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    player_id: int = Field(alias="playerId")
    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(alias="lastName")
    sweater_number: int | None = Field(default=None, alias="sweaterNumber")
    position_code: str = Field(default="", alias="positionCode")
    games_played: int = Field(default=0, alias="gamesPlayed")
    goals: int = 0
    assists: int = 0
    points: int = 0
    plus_minus: int = Field(default=0, alias="plusMinus")
    penalty_minutes: int = Field(default=0, alias="penaltyMinutes")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class ClubGoalieStats(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    player_id: int = Field(alias="playerId")
    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(alias="lastName")
    sweater_number: int | None = Field(default=None, alias="sweaterNumber")
    games_played: int = Field(default=0, alias="gamesPlayed")
    wins: int = 0
    losses: int = 0
    ot_losses: int = Field(default=0, alias="overtimeLosses")
    goals_against_average: float = Field(default=0.0, alias="goalsAgainstAverage")
    save_percentage: float = Field(default=0.0, alias="savePercentage")
    shutouts: int = 0

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class ClubStats(BaseModel):
    season: str = ""
    skaters: list[ClubSkaterStats] = Field(default_factory=list)
    goalies: list[ClubGoalieStats] = Field(default_factory=list)


# --- Player landing ---


class SeasonTotal(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    season: int
    team_name: str = Field(default="", alias="teamName")
    league_abbrev: str = Field(default="NHL", alias="leagueAbbrev")
    game_type_id: int = Field(default=2, alias="gameTypeId")
    games_played: int = Field(default=0, alias="gamesPlayed")
    goals: int | None = None
    assists: int | None = None
    points: int | None = None
    plus_minus: int | None = Field(default=None, alias="plusMinus")
    wins: int | None = None
    losses: int | None = None
    goals_against_avg: float | None = Field(default=None, alias="goalsAgainstAvg")
    save_pctg: float | None = Field(default=None, alias="savePctg")

    @property
    def season_label(self) -> str:
        """``20232024`` -> ``"2023-24"``."""
        text = str(self.season)
        if len(text) == 8:
            return f"{text[:4]}-{text[6:]}"
        return text


class PlayerLanding(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    player_id: int = Field(alias="playerId")
    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(alias="lastName")
    sweater_number: int | None = Field(default=None, alias="sweaterNumber")
    position: str = ""
    current_team_abbrev: str | None = Field(default=None, alias="currentTeamAbbrev")
    birth_date: str = Field(default="", alias="birthDate")
    birth_city: str = Field(default="", alias="birthCity")
    height_in_inches: int | None = Field(default=None, alias="heightInInches")
    weight_in_pounds: int | None = Field(default=None, alias="weightInPounds")
    shoots_catches: str = Field(default="", alias="shootsCatches")
    season_totals: list[SeasonTotal] = Field(default_factory=list, alias="seasonTotals")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def is_goalie(self) -> bool:
        return self.position == "G"
