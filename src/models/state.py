"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

from pathlib import Path
from argparse import Namespace
from typing import Optional, Type, TypeVar, Callable, TYPE_CHECKING
from dataclasses import dataclass, field

# Forward reference for type hint - avoid circular import
if TYPE_CHECKING:
    from .pen import ExportResult


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the export pipeline (state bus pattern).

    This dataclass carries all program state through the functional pipeline,
    with each stage adding new fields as the export progresses.

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, swingDir, openBrowser
        - env_check: swingPath, envOK
        - pen_export: exportResult
        - results_save: penFile, urlFile
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory containing the swing
        outputdir: Directory receiving the exported definition
        verbosity: Logging verbosity level (1-3)
        swingDir: Swing directory (relative to inputdir)
        openBrowser: Open the viewer URL once the pen is uploaded
        envOK: Environment validation passed
        swingPath: Resolved path to the swing directory
        exportResult: Uploaded pen, its link and the viewer URL
        penFile: Written copy of the uploaded definition
        urlFile: Written viewer URL
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    swingDir: str = field(default=".")
    openBrowser: bool = field(default=False)

    # Pipeline state
    envOK: bool = field(default=False)
    swingPath: Path = field(default=Path("/"))
    exportResult: Optional["ExportResult"] = field(default=None)
    penFile: Optional[Path] = field(default=None)
    urlFile: Optional[Path] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Args:
            options: Parsed CLI arguments (swingDir, openBrowser, etc.)
            inputdir: Directory containing the swing
            outputdir: Directory for export output

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        options_dict = vars(options)

        import dataclasses
        valid_fields = {f.name for f in dataclasses.fields(cls)}

        # Drop CLI options that have no field in ProgramState
        filtered_options = {k: v for k, v in options_dict.items() if k in valid_fields}

        merged_args = {**filtered_options, "inputdir": inputdir, "outputdir": outputdir}

        return cls(**merged_args)

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
            pen_export,
            results_save,
            results_report
        )

    This is equivalent to:
        results_report(results_save(pen_export(env_check(initial_state))))
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
