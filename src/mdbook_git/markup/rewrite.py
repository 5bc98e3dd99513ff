from __future__ import annotations

from dataclasses import dataclass

from ..core.context import RunContext
from ..core.logging import log_event
from ..errors import ResolutionError
from .command import parse_command
from .resolver import ContentResolver, Repository
from .scanner import find_tokens


@dataclass
class RewriteStats:
    replaced: int = 0
    skipped_parse: int = 0
    skipped_resolve: int = 0

    @property
    def skipped(self) -> int:
        return self.skipped_parse + self.skipped_resolve


def rewrite_with_stats(
    content: str,
    repository: Repository | None,
    ctx: RunContext | None = None,
) -> tuple[str, RewriteStats]:
    """Replace every resolvable `#git` token; everything else is copied through verbatim."""
    stats = RewriteStats()
    if repository is None:
        return content, stats
    resolver = ContentResolver(repository)
    pieces: list[str] = []
    previous_end = 0
    for token in find_tokens(content):
        command = parse_command(token.body)
        if command is None:
            stats.skipped_parse += 1
            log_event(ctx, "debug", "rewrite", "skip", reason="parse", token=token.text)
            continue
        try:
            replacement = resolver.resolve(command)
        except ResolutionError as exc:
            stats.skipped_resolve += 1
            log_event(ctx, "debug", "rewrite", "skip", reason="resolve", token=token.text, error=str(exc))
            continue
        pieces.append(content[previous_end : token.start])
        pieces.append(replacement)
        previous_end = token.end
        stats.replaced += 1
    pieces.append(content[previous_end:])
    return "".join(pieces), stats


def rewrite(content: str, repository: Repository | None, ctx: RunContext | None = None) -> str:
    return rewrite_with_stats(content, repository, ctx)[0]
