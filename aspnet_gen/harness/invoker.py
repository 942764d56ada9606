"""Synchronous generator invocation.

Generators render asynchronously; :class:`GeneratorInvoker` hides that by
driving each run to completion before returning, so callers never observe a
partially written tree.
"""

from __future__ import annotations

import asyncio
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, Coroutine, Mapping, Sequence, TypeVar

from rich.markup import escape

from ..config import GeneratorConfig
from ..generators.registry import create_generator
from ..generators.templates import TemplateRenderer
from ..utils import console

T = TypeVar("T")


def run_sync(coro: Coroutine[Any, Any, T]) -> T:
    """Run *coro* to completion from synchronous code.

    Works inside an already running event loop (e.g. an async test) by
    running the coroutine on a private loop in a worker thread.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)
    with ThreadPoolExecutor(max_workers=1) as pool:
        return pool.submit(asyncio.run, coro).result()


class GeneratorInvoker:
    """Runs named generators with explicit arguments, cwd and answers.

    ``config.answers`` supplies default prompt answers; per-call ``answers``
    override them.  Each call gets its own merged copy.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        renderer: TemplateRenderer | None = None,
        *,
        verbose: bool = False,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.renderer = renderer or TemplateRenderer(self.config.template_dir)
        self.verbose = verbose

    async def ainvoke(
        self,
        generator_name: str,
        args: Sequence[str] = (),
        cwd: str | Path | None = None,
        answers: Mapping[str, str] | None = None,
    ) -> list[Path]:
        """Awaitable form of :meth:`invoke`."""
        generator = create_generator(generator_name, self.renderer, self.config)
        target = Path(cwd) if cwd is not None else Path.cwd()
        merged = {**self.config.answers, **(answers or {})}
        written = await generator.generate(list(args), target, merged)
        if self.verbose:
            for path in written:
                console.print(f"  [green]create[/green] {escape(str(path))}")
        return written

    def invoke(
        self,
        generator_name: str,
        args: Sequence[str] = (),
        cwd: str | Path | None = None,
        answers: Mapping[str, str] | None = None,
    ) -> list[Path]:
        """Run *generator_name* and return the written paths.

        Every file exists with its final content when this returns.

        Raises:
            UnknownGeneratorError: *generator_name* is not registered.
            GeneratorPreconditionError: the generator rejected its arguments
                or working directory.
        """
        return run_sync(self.ainvoke(generator_name, args, cwd, answers))
