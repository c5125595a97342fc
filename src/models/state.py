"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing processing stages.
"""

import dataclasses
from pathlib import Path
from argparse import Namespace
from typing import Any, Optional, Type, TypeVar, List, Dict, Callable
from dataclasses import dataclass, field
from functools import reduce

from ..config import appsettings


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the preprocessing pipeline (state bus pattern).

    This dataclass carries all program state through the functional pipeline,
    with each stage adding new fields as processing progresses.

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, tags, comment, pattern
        - env_check: envOK
        - registry_build: registry
        - sources_transform: results
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory containing JavaScript sources
        outputdir: Directory receiving the transformed sources
        verbosity: Logging verbosity level (1-3)
        tags: Whitespace separated tag tokens (e.g., "debug log:console.log")
        comment: Optional text prepended to each output as a // comment
        pattern: Glob selecting input files within inputdir
        envOK: Environment validation passed
        registry: TagRegistry built from tags/comment
        results: Per-file TransformResult, keyed by output path
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    tags: str = field(default="")
    comment: Optional[str] = field(default=None)
    pattern: str = field(default_factory=lambda: appsettings.default_pattern)

    # Pipeline state
    envOK: bool = field(default=False)
    registry: Optional[Any] = field(default=None)  # TagRegistry at runtime
    results: Dict[str, Any] = field(default_factory=dict)  # TransformResult values

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Args:
            options: Parsed CLI arguments (tags, comment, pattern, verbosity)
            inputdir: Directory containing source files
            outputdir: Directory for transformed output

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        options_dict = vars(options)

        # Only keep options that are ProgramState fields
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered_options = {k: v for k, v in options_dict.items() if k in valid_fields}

        merged_args = {**filtered_options, "inputdir": inputdir, "outputdir": outputdir}
        return cls(**merged_args)

    def tokens_make(self) -> List[str]:
        """
        Turn the tag/comment options into configuration tokens.

        Returns:
            Token list understood by registry_fromTokens()

        Example:
            >>> ProgramState(tags="debug log:console.log", comment="Devel").tokens_make()
            ['debug', 'log:console.log', '-comment', 'Devel']
        """
        tokens = self.tags.split()
        if self.comment is not None:
            tokens += ["-comment", self.comment]
        return tokens

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            registry_build,
            sources_transform,
            results_report
        )

    This is equivalent to:
        results_report(sources_transform(registry_build(env_check(initial_state))))
    """
    return reduce(lambda state, stage: stage(state), stages, initial_state)
