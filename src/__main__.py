#!/usr/bin/env python3
"""
jsdev - Activate tagged comments in JavaScript sources

JSDev implements a tiny macro language written as tagged comments. The
comments are inert in shipped code; jsdev turns the ones whose tags are
activated into executable code for debugging, logging or tracing.

    /*tag stuff*/               ->  {stuff}
    /*tag(condition) stuff*/    ->  if (condition) {stuff}

A tag declared as tag:method expands into a call instead:

    /*tag stuff*/               ->  {method(stuff);}
    /*tag(condition) stuff*/    ->  if (condition) {method(stuff);}

There must be no space between /* and the tag, nor between the tag and
the parenthesis of the condition.

Two front ends share the same engine:

Usage (filter, stdin to stdout):
    jsdev-filter debug log:console.log alarm:alert -comment "Devel Edition" < app.js

Usage (directory, as a ChRIS plugin):
    jsdev inputdir/ outputdir/ --tags "debug log:console.log" --comment "Devel Edition"

Examples:
    # Activate only logging, for every .js file under inputdir
    jsdev src/ build/ --tags "log:console.log"

    # Only .mjs files, verbose
    jsdev src/ build/ --tags debug --pattern "**/*.mjs" -vv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter
from typing import List, Optional, TextIO

from chris_plugin import chris_plugin, PathMapper
from .lib import registry_fromTokens, stream_transform, __version__, LOG, state_connectToLogger
from .config import appsettings
from .models import ProgramState, pipeline, JsdevError
from .models.errors import InputError, OutputError


DISPLAY_TITLE = r"""
     _         _
    (_)___  __| | _____   __
    | / __|/ _` |/ _ \ \ / /
    | \__ \ (_| |  __/\ V /
   _/ |___/\__,_|\___| \_/
  |__/

  Activate tagged comments
"""

# Define CLI arguments
parser = ArgumentParser(
    description="jsdev - turn tagged comments in JavaScript into debugging code",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--tags",
    default="",
    type=str,
    help="Space separated tags to activate, each <tag> or <tag>:<method>",
)

parser.add_argument(
    "--comment",
    default=None,
    type=str,
    help="Text prepended to every output file as a // comment",
)

parser.add_argument(
    "--pattern",
    default=appsettings.default_pattern,
    type=str,
    help="Glob selecting the source files within inputdir",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv, -vvv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def error_exit(error: JsdevError, origin: Optional[Path] = None) -> None:
    """Print the diagnostic for a fatal error and exit with status 1"""
    detail = error.diagnostic()
    if origin is not None:
        detail = f"{origin}: {detail}"
    print(appsettings.diagnostic_make(detail), file=sys.stderr)
    sys.exit(1)


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate the input directory and create the output directory.

    Exits:
        1 if inputdir does not exist or outputdir cannot be created
    """
    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    if state.inputdir is None or not state.inputdir.is_dir():
        print(f"Error: Input directory not found: {state.inputdir}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    try:
        state.outputdir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        error_exit(OutputError(e), state.outputdir)
    LOG(f"Input directory: {state.inputdir}", level=2)
    LOG(f"Output directory: {state.outputdir}", level=2)

    state.envOK = True
    return state


def registry_build(inputstate: ProgramState) -> ProgramState:
    """
    Build the tag registry from the --tags and --comment options.

    Returns:
        ProgramState with added field:
            - registry: TagRegistry of the activated tags

    Exits:
        1 on a malformed tag token
    """
    state = inputstate.copy()

    try:
        state.registry = registry_fromTokens(state.tokens_make())
    except JsdevError as e:
        error_exit(e)

    LOG(f"Activated {len(state.registry)} tags", level=2)
    return state


def sources_transform(inputstate: ProgramState) -> ProgramState:
    """
    Transform every matching file from inputdir into outputdir.

    Output files mirror the input layout. The first error stops the run.

    Returns:
        ProgramState with added field:
            - results: TransformResult per output file

    Exits:
        1 on the first scan or output error
    """
    state = inputstate.copy()
    state.results = {}

    mapper = PathMapper.file_mapper(state.inputdir, state.outputdir, glob=state.pattern)
    for input_file, output_file in mapper:
        LOG(f"Processing {input_file}", level=1)
        try:
            source = input_file.open(
                "r", encoding=appsettings.encoding, errors=appsettings.encoding_errors, newline=""
            )
        except OSError as e:
            error_exit(InputError(e), input_file)
        with source:
            try:
                output_file.parent.mkdir(parents=True, exist_ok=True)
                with output_file.open(
                    "w", encoding=appsettings.encoding, errors=appsettings.encoding_errors, newline=""
                ) as sink:
                    result = stream_transform(source, sink, state.registry)
            except JsdevError as e:
                error_exit(e, input_file)
            except OSError as e:
                error_exit(OutputError(e), input_file)
        state.results[str(output_file)] = result

    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """Summarize the run (terminal pipeline stage)"""
    state: ProgramState = inputstate.copy()

    expanded = sum(result.expansion_total for result in state.results.values())
    LOG(f"✓ Transformed {len(state.results)} files, {expanded} comments expanded", level=1)
    for output_file, result in state.results.items():
        for tag_name, count in result.expansions.items():
            LOG(f"  {output_file}: {tag_name} x{count}", level=2)
    return state


def stream_prepare(stream: TextIO) -> TextIO:
    """Switch a standard stream to the configured codec without newline translation"""
    stream.reconfigure(
        encoding=appsettings.encoding, errors=appsettings.encoding_errors, newline=""
    )
    return stream


def sink_flush(sink: TextIO) -> None:
    """Flush the sink, raising OutputError on failure"""
    try:
        sink.flush()
    except OSError as e:
        raise OutputError(e) from e


def filter_main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> None:
    """
    Filter entry point - transform stdin to stdout.

    Arguments are configuration tokens, exactly as on the classic method
    line: `<tag>`, `<tag>:<method>`, or `-comment <text>`.

    Args:
        argv: Tokens (defaults to sys.argv[1:])
        stdin: Source stream (defaults to sys.stdin)
        stdout: Sink stream (defaults to sys.stdout)

    Exits:
        1 on any configuration, scan or output error
    """
    tokens = sys.argv[1:] if argv is None else argv
    try:
        registry = registry_fromTokens(tokens)
        source = stdin if stdin is not None else stream_prepare(sys.stdin)
        sink = stdout if stdout is not None else stream_prepare(sys.stdout)
        stream_transform(source, sink, registry)
        sink_flush(sink)
    except JsdevError as e:
        error_exit(e)


@chris_plugin(
    parser=parser,
    title="jsdev - Activate tagged comments in JavaScript",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Directory entry point - transform all matching sources in inputdir.

    Orchestrates the pipeline:
        1. env_check: Validate paths
        2. registry_build: Parse --tags/--comment into a TagRegistry
        3. sources_transform: Run the preprocessor over each file
        4. results_report: Summarize

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    state_connectToLogger(state)

    pipeline(state, env_check, registry_build, sources_transform, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
