from __future__ import annotations

from ..core.context import RunContext
from ..core.logging import log_event
from ..markup.rewrite import rewrite_with_stats
from .config import GitConfig, open_repository
from .protocol import Book, Chapter, PreprocessorContext, for_each_chapter
from .version import SUPPORTED_MDBOOK_VERSION, version_matches


class GitPreprocessor:
    name = "git"

    def __init__(self, run_ctx: RunContext | None = None) -> None:
        self.run_ctx = run_ctx

    def supports_renderer(self, renderer: str) -> bool:
        return renderer != "not-supported"

    def check_version(self, ctx: PreprocessorContext) -> bool:
        if version_matches(SUPPORTED_MDBOOK_VERSION, ctx.mdbook_version):
            return True
        log_event(
            self.run_ctx,
            "warning",
            "preprocessor",
            "version-mismatch",
            message=(
                f"The {self.name} plugin was built against version {SUPPORTED_MDBOOK_VERSION} of mdbook, "
                f"but we're being called from version {ctx.mdbook_version}"
            ),
        )
        return False

    def run(self, ctx: PreprocessorContext, book: Book) -> Book:
        cfg = GitConfig.from_table(ctx.preprocessor_config(self.name))
        repository = open_repository(ctx, cfg, self.run_ctx)
        log_event(
            self.run_ctx,
            "info",
            "preprocessor",
            "repository",
            path=(str(repository.root) if repository else "none"),
        )
        if repository is None:
            return book

        def _rewrite_chapter(chapter: Chapter) -> None:
            if chapter.get("path") is None:
                return
            content, stats = rewrite_with_stats(str(chapter.get("content", "")), repository, self.run_ctx)
            chapter["content"] = content
            log_event(
                self.run_ctx,
                "debug",
                "rewrite",
                "chapter",
                chapter=chapter.get("path"),
                replaced=stats.replaced,
                skipped=stats.skipped,
            )

        for_each_chapter(book, _rewrite_chapter)
        return book
