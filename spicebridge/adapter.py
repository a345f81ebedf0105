"""Facade adapter for simplified API integration."""

from environs import Env

from spicebridge.application.services import admin, kernels
from spicebridge.domain.models.enums import KernelType
from spicebridge.domain.models.results import CallResult
from spicebridge.infrastructure.storage import KernelDirectory
from spicebridge.logging_config import get_logger

logger = get_logger(__name__)


class SpiceAPI:
    """
    Simplified facade over kernel management and toolkit state.

    Resolves kernel paths against a configured directory and keeps the
    administrative calls in one place. The wrapper catalogue itself lives in
    ``spicebridge.application.services`` and is used directly.
    """

    def __init__(self, kernel_directory: KernelDirectory):
        """
        Initialize facade with its kernel directory.

        Args:
            kernel_directory: Base directory used to resolve relative kernel paths
        """
        self._kernels = kernel_directory

    @property
    def kernel_directory(self) -> KernelDirectory:
        return self._kernels

    @classmethod
    def create_from_env(cls, env: Env) -> "SpiceAPI":
        """
        Factory method: one-line initialization from environment.

        Reads SPICE_KERNEL_DIR and loads every kernel listed in SPICE_KERNELS.

        Args:
            env: Environment variable handler (Env instance)

        Returns:
            Configured SpiceAPI with the configured kernels loaded

        Raises:
            SpiceCallError: If a configured kernel cannot be loaded

        Example:
            >>> from environs import Env
            >>> env = Env()
            >>> env.read_env()
            >>> api = SpiceAPI.create_from_env(env)
        """
        kernel_dir = env.path("SPICE_KERNEL_DIR", "kernels")
        configured = env.list("SPICE_KERNELS", [])

        api = cls(KernelDirectory(kernel_dir))
        if configured:
            api.load_all(configured).unwrap()
        return api

    def load(self, relative_path: str) -> CallResult:
        return kernels.furnsh(self._kernels.resolve(relative_path))

    def load_all(self, relative_paths: list[str] | None = None) -> CallResult:
        """
        Load kernels in order. With no paths, load every kernel file found
        in the kernel directory.
        """
        if relative_paths is None:
            relative_paths = self._kernels.enumerate_kernels()
        paths = self._kernels.combine_paths(relative_paths)
        logger.info(f"Loading {len(paths)} kernels from {self._kernels.base_dir}")
        return kernels.furnsh_list(paths)

    def unload(self, relative_path: str) -> CallResult:
        return kernels.unload(self._kernels.resolve(relative_path))

    def reset_all(self) -> CallResult:
        """Unload everything and restore bridged error handling."""
        return admin.init_all()

    def loaded_count(self, kind: KernelType = KernelType.ALL) -> int:
        """Number of loaded kernels; raises SpiceCallError if the count fails."""
        return kernels.ktotal(kind).unwrap()
