"""Route-to-specification pipeline.

Each route goes through compose -> generate -> parse on its own; only the
assembler sees more than one route. With ``workers > 1`` the per-route steps
run on a thread pool and finished results are handed back to the calling
thread, which is the only writer to the assembler. In that mode a path
produced by two routes keeps whichever route *finished* last.
"""

import logging
from collections.abc import Callable, Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass

from nextjs_openapi.errors import RouteDocError
from nextjs_openapi.generator.assembler import SpecAssembler, SpecificationDocument
from nextjs_openapi.generator.prompt import build_prompt
from nextjs_openapi.llm import TextGenerator
from nextjs_openapi.parser.base import RouteDocumentation
from nextjs_openapi.parser.reply import parse_reply
from nextjs_openapi.scanner.base import RouteUnit

logger = logging.getLogger(__name__)


@dataclass
class RouteResult:
    """Outcome of documenting one route: exactly one of doc/error is set."""

    route: RouteUnit
    doc: RouteDocumentation | None = None
    error: RouteDocError | None = None

    @property
    def ok(self) -> bool:
        return self.doc is not None


@dataclass
class SpecRun:
    document: SpecificationDocument
    results: list[RouteResult]

    @property
    def discovered(self) -> int:
        return len(self.results)

    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.results if r.ok)

    @property
    def failed(self) -> int:
        return self.discovered - self.succeeded


ProgressCallback = Callable[[int, int, RouteResult], None]


class SpecGenerator:
    """Documents route files through a text generator and assembles the OpenAPI document."""

    def __init__(self, client: TextGenerator, workers: int = 1):
        self.client = client
        self.workers = max(1, workers)

    def document_route(self, route: RouteUnit) -> RouteResult:
        """Run compose -> generate -> parse for one route, capturing failures."""
        try:
            reply = self.client.generate(build_prompt(route))
            doc = parse_reply(reply)
        except RouteDocError as e:
            logger.debug("Route %s failed: %s", route.file_path, e)
            return RouteResult(route=route, error=e)
        return RouteResult(route=route, doc=doc)

    def generate(self, routes: list[RouteUnit], on_result: ProgressCallback | None = None) -> SpecRun:
        """Document every route and fold the successes into one document."""
        assembler = SpecAssembler()
        results = []
        total = len(routes)

        for index, result in enumerate(self._results(routes), start=1):
            if result.ok:
                assembler.add(result.doc)
            results.append(result)
            if on_result is not None:
                on_result(index, total, result)

        return SpecRun(document=assembler.build(), results=results)

    def _results(self, routes: Iterable[RouteUnit]) -> Iterator[RouteResult]:
        if self.workers == 1:
            for route in routes:
                yield self.document_route(route)
            return

        with ThreadPoolExecutor(max_workers=self.workers) as pool:
            futures = [pool.submit(self.document_route, route) for route in routes]
            for future in as_completed(futures):
                yield future.result()
