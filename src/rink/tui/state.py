"""Application state owned by the caller and threaded through each frame."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from rink.tui.config import Config, ConfigManager
from rink.tui.models import Boxscore, ClubStats, GameSummary, PlayerLanding, Standing
from rink.tui.navigation import DocumentStack, DocumentStackEntry, SettingsCategory, StackedDocument, Tab

# ---------------------------------------------------------------------------
# Loading keys
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LoadingKey:
    """Identifies one in-flight fetch of the external data provider."""

    kind: str
    ident: str | int | None = None

    @classmethod
    def schedule(cls) -> LoadingKey:
        return cls("schedule")

    @classmethod
    def standings(cls) -> LoadingKey:
        return cls("standings")

    @classmethod
    def boxscore(cls, game_id: int) -> LoadingKey:
        return cls("boxscore", game_id)

    @classmethod
    def team_roster(cls, abbrev: str) -> LoadingKey:
        return cls("team_roster", abbrev)

    @classmethod
    def player(cls, player_id: int) -> LoadingKey:
        return cls("player", player_id)


# ---------------------------------------------------------------------------
# State slices
# ---------------------------------------------------------------------------


@dataclass
class NavigationState:
    current_tab: Tab = Tab.SCORES
    document_stack: DocumentStack = field(default_factory=DocumentStack)
    focus_in_content: bool = False

    def push_document(self, document: StackedDocument, focus_index: int | None = None) -> DocumentStackEntry:
        """Drill into *document*; keyboard focus moves into the content area."""
        self.focus_in_content = True
        return self.document_stack.push(document, focus_index)

    def pop_document(self) -> DocumentStackEntry | None:
        return self.document_stack.pop()

    def switch_tab(self, tab: Tab) -> None:
        """Select *tab*, closing any open documents."""
        self.current_tab = tab
        self.document_stack.clear()
        self.focus_in_content = False

    def current_breadcrumb_labels(self) -> list[str]:
        return self.document_stack.breadcrumb_labels(self.current_tab)


@dataclass
class DataState:
    """Snapshots delivered by the data provider; ``None`` means not yet fetched."""

    game_date: str = ""
    games: list[GameSummary] | None = None
    boxscores: dict[int, Boxscore] = field(default_factory=dict)
    standings: list[Standing] | None = None
    team_roster_stats: dict[str, ClubStats] = field(default_factory=dict)
    player_data: dict[int, PlayerLanding] = field(default_factory=dict)
    loading: set[LoadingKey] = field(default_factory=set)

    def is_loading(self, key: LoadingKey) -> bool:
        return key in self.loading

    def standing_for(self, abbrev: str) -> Standing | None:
        for standing in self.standings or []:
            if standing.team_abbrev == abbrev:
                return standing
        return None


@dataclass
class UiState:
    # Category the settings tab opens on the first time it is shown.
    settings_category: SettingsCategory = SettingsCategory.LOGGING


@dataclass
class SystemState:
    config: Config = field(default_factory=Config)
    animation_frame: int = 0
    status_message: str | None = None
    status_is_error: bool = False
    last_refresh: datetime | None = None
    refresh_requested: bool = False
    running: bool = True
    config_manager: ConfigManager | None = None

    def set_config(self, config: Config) -> None:
        """Replace the live config, persisting it through the manager if any."""
        self.config = config
        if self.config_manager is not None:
            self.config_manager.update(config)

    def set_status(self, message: str | None, error: bool = False) -> None:
        self.status_message = message
        self.status_is_error = error

    def tick(self) -> None:
        self.animation_frame += 1


@dataclass
class AppState:
    navigation: NavigationState = field(default_factory=NavigationState)
    data: DataState = field(default_factory=DataState)
    ui: UiState = field(default_factory=UiState)
    system: SystemState = field(default_factory=SystemState)

    @classmethod
    def from_manager(cls, manager: ConfigManager) -> AppState:
        return cls(system=SystemState(config=manager.config, config_manager=manager))
