from collections.abc import Iterable
from pathlib import Path

from spicebridge.domain.constants import KERNEL_DIR, KERNEL_EXTENSIONS
from spicebridge.domain.exceptions import KernelDirectoryError
from spicebridge.logging_config import get_logger

logger = get_logger(__name__)


class KernelDirectory:
    """Kernel files under a base directory, addressed by relative paths."""

    def __init__(self, base_dir: str | Path = KERNEL_DIR):
        self.base_dir = Path(base_dir)

    def resolve(self, relative_path: str | Path) -> Path:
        """Absolute paths pass through; relative ones are joined to the base."""
        path = Path(relative_path)
        return path if path.is_absolute() else self.base_dir / path

    def combine_paths(self, relative_paths: Iterable[str | Path]) -> list[Path]:
        return [self.resolve(p) for p in relative_paths]

    def enumerate_kernels(
        self,
        relative_directory: str | Path = "",
        error_if_no_files_found: bool = True,
        extensions: tuple[str, ...] = KERNEL_EXTENSIONS,
    ) -> list[str]:
        """
        List kernel files in a directory, as paths relative to the base.

        Raises:
            KernelDirectoryError: If the directory does not exist, or holds no
                kernel files and ``error_if_no_files_found`` is set
        """
        directory = self.resolve(relative_directory)
        if not directory.is_dir():
            raise KernelDirectoryError(f"Kernel directory not found: {directory}")

        kernels = sorted(
            str(p.relative_to(self.base_dir))
            for p in directory.iterdir()
            if p.is_file() and p.suffix.lower() in extensions
        )
        if not kernels and error_if_no_files_found:
            raise KernelDirectoryError(f"No kernel files found in {directory}")

        logger.debug(f"Found {len(kernels)} kernel files in {directory}")
        return kernels
