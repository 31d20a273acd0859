#!/usr/bin/env python3
"""
Category tree orchestration.

Runs the scan -> build -> render -> sink pipeline for one dataset.
"""

import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, List, Optional, Union

from .errors import SerializationError, SinkWriteError
from .models import FOREST_ROOT_NAME, BuildResults, ConflictPolicy, ExportOutcome
from .tree import TreeBuilder, TreeRenderer, render_json, scan
from .utils import FileSink

JSON_ARTIFACT = "json"
HTML_ARTIFACT = "html"


class CategoryAnalyzer:
    """Builds the category forest for a data directory and exports it."""

    def __init__(
        self,
        data_dir: Union[str, Path] = "data",
        policy: ConflictPolicy = ConflictPolicy.LAST_WRITER_WINS,
        renderer: Optional[TreeRenderer] = None,
        root_name: str = FOREST_ROOT_NAME,
    ):
        self.data_dir = Path(data_dir)
        self.policy = policy
        self.renderer = renderer or TreeRenderer()
        self.root_name = root_name

    def build(self) -> BuildResults:
        """Scan the data directory and build a fresh forest."""
        start_time = time.time()

        categories = scan(self.data_dir)
        builder = TreeBuilder(categories, policy=self.policy)
        forest = builder.build(self.root_name)

        results = BuildResults(forest=forest, issues=builder.issues, data_dir=str(self.data_dir))
        results.execution_time = time.time() - start_time
        return results

    def export(
        self,
        results: BuildResults,
        sink: FileSink,
        json_name: str = "domain_tree.json",
        html_name: str = "domain_tree.html",
        generated_at: Optional[datetime] = None,
    ) -> List[ExportOutcome]:
        """Render and persist both artifacts; a failure in one does not stop the other."""
        if generated_at is None:
            generated_at = datetime.now(timezone.utc)
        forest = results.forest

        return [
            self._export_artifact(JSON_ARTIFACT, json_name, sink, lambda: render_json(forest)),
            self._export_artifact(
                HTML_ARTIFACT, html_name, sink,
                lambda: self.renderer.to_annotated_markup(forest, generated_at),
            ),
        ]

    def _export_artifact(
        self, artifact: str, name: str, sink: FileSink, render: Callable[[], str]
    ) -> ExportOutcome:
        outcome = ExportOutcome(artifact=artifact, destination=str(sink.destination(name)))
        try:
            payload = render().encode("utf-8")
            outcome.destination = str(sink.write(name, payload))
            outcome.bytes_written = len(payload)
        except (SerializationError, SinkWriteError) as e:
            outcome.error = str(e)
        return outcome
