"""Textual TUI application for the galaxy dashboard.

Shows the current galaxy in three views (overview, system intelligence and
planet management) and keeps resource totals ticking by re-reading the
galaxy store once per second.
"""

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.widgets import Footer, Header, Static

from ..models.galaxy import Galaxy
from ..server.session import GalaxyStore
from .renderer import GalaxyRenderer

VIEWS = ("overview", "system", "planet")

VIEW_TITLES = {
    "overview": "Overview",
    "system": "System View",
    "planet": "Planet Management",
}


class GalaxyPanel(Static):
    """Widget to display the active dashboard view."""

    def __init__(self, *args, **kwargs):
        """Initialize galaxy panel."""
        super().__init__(*args, **kwargs)
        self.renderer = GalaxyRenderer()

    def update_view(self, galaxy: Galaxy, view: str, system_index: int = 0) -> None:
        """Render the given view of the galaxy.

        Args:
            galaxy: Galaxy with up-to-date resources
            view: One of "overview", "system", "planet"
            system_index: Solar system shown in the system view
        """
        if view == "system":
            if not galaxy.solar_systems:
                self.update("[dim]No solar systems available.[/dim]")
                return
            system = galaxy.solar_systems[system_index % len(galaxy.solar_systems)]
            self.update(self.renderer.render_system(system))
        elif view == "planet":
            self.update(self.renderer.render_planet_management(galaxy))
        else:
            self.update(self.renderer.render_overview(galaxy))


class GalaxyDashboardTUI(App):
    """Galaxy dashboard TUI application."""

    ENABLE_COMMAND_PALETTE = False

    CSS = """
    #content {
        border: solid green;
        height: 1fr;
    }

    GalaxyPanel {
        width: 100%;
        height: auto;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("o", "show_view('overview')", "Overview", show=True),
        Binding("s", "next_system", "Systems", show=True),
        Binding("p", "show_view('planet')", "Planets", show=True),
        Binding("r", "regenerate", "Regenerate", show=True),
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(self, store: GalaxyStore, refresh_seconds: float = 1.0, *args, **kwargs):
        """Initialize the TUI app.

        Args:
            store: Galaxy store to display
            refresh_seconds: Interval between resource refreshes
        """
        super().__init__(*args, **kwargs)
        self.store = store
        self.refresh_seconds = refresh_seconds
        self.view = "overview"
        self.system_index = 0
        self.galaxy_panel: GalaxyPanel | None = None

    def compose(self) -> ComposeResult:
        """Create child widgets."""
        yield Header()
        content = VerticalScroll(id="content")
        content.border_title = VIEW_TITLES[self.view]
        with content:
            self.galaxy_panel = GalaxyPanel(id="galaxy_panel")
            yield self.galaxy_panel
        yield Footer()

    def on_mount(self) -> None:
        """Handle mount event."""
        self.title = "Galaxy Dashboard"
        self.refresh_display()
        self.set_interval(self.refresh_seconds, self.refresh_display)

    def refresh_display(self) -> None:
        """Advance resources to now and redraw the active view."""
        galaxy = self.store.get_galaxy()
        self.sub_title = galaxy.name
        self.query_one("#content").border_title = VIEW_TITLES[self.view]
        if self.galaxy_panel:
            self.galaxy_panel.update_view(galaxy, self.view, self.system_index)

    def action_show_view(self, view: str) -> None:
        """Switch to another view."""
        if view in VIEWS:
            self.view = view
            self.refresh_display()

    def action_next_system(self) -> None:
        """Show the system view, cycling through systems on repeat presses."""
        if self.view == "system":
            self.system_index += 1
        else:
            self.view = "system"
            self.system_index = 0
        self.refresh_display()

    def action_regenerate(self) -> None:
        """Replace the galaxy with a new one."""
        galaxy = self.store.regenerate()
        self.system_index = 0
        self.notify(f"Generated {galaxy.name}")
        self.refresh_display()
