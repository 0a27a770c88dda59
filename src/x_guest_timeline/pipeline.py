from __future__ import annotations

import requests
from rich.console import Console
from rich.markup import escape

from .client.credentials import CredentialExtractor
from .client.gateway import GraphQLGateway
from .client.session import activate_session
from .client.timeline import DEFAULT_COUNT, fetch_timeline
from .client.users import normalize_handle, resolve_user_id
from .models import PostRecord
from .parser import TimelineParser


console = Console(stderr=True)


def _short(token: str) -> str:
    return f"{token[:20]}..." if len(token) > 20 else token


class TimelinePipeline:
    """Extract -> activate -> resolve -> fetch -> parse, in that order.

    The bearer credential is scraped on the first run and reused by later
    runs of the same pipeline. Each run activates its own guest session.
    Any stage failure raises a TimelineError and ends the run.
    """

    def __init__(self, http: requests.Session | None = None, timeout: float = 30.0, quiet: bool = False):
        self.http = http or requests.Session()
        self.timeout = timeout
        self.quiet = quiet
        self.extractor = CredentialExtractor(self.http, timeout=timeout)
        self.gateway = GraphQLGateway(self.http, timeout=timeout)
        self.last_diagnostic: str | None = None

    def _log(self, msg: str) -> None:
        if not self.quiet:
            console.print(msg)

    def bearer(self) -> str:
        if not self.extractor.cached:
            self._log("[bold]Extracting[/bold] bearer credential...")
        return self.extractor.extract()

    def start_session(self, bearer: str) -> str:
        self._log("[bold]Activating[/bold] guest session...")
        token = activate_session(self.http, bearer, timeout=self.timeout)
        self._log(f"Activated guest session {escape(_short(token))}")
        return token

    def run(self, handle: str, count: int = DEFAULT_COUNT) -> list[PostRecord]:
        handle = normalize_handle(handle)

        bearer = self.bearer()
        session = self.start_session(bearer)

        self._log(f"[bold]Resolving[/bold] @{escape(handle)}...")
        user_id = resolve_user_id(self.gateway, handle, bearer, session)
        self._log(f"Resolved @{escape(handle)} -> {escape(user_id)}")

        self._log(f"[bold]Fetching[/bold] timeline (count={count})...")
        response = fetch_timeline(self.gateway, user_id, bearer, session, count=count)
        self._log("Fetched timeline")

        parser = TimelineParser()
        posts = parser.parse(response)
        self.last_diagnostic = parser.diagnostic
        if parser.diagnostic:
            self._log(f"[yellow]{escape(parser.diagnostic)}[/yellow]")
        self._log(f"[green]Parsed[/green] {len(posts)} posts")
        return posts
