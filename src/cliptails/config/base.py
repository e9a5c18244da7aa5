# region Docstring
"""
cliptails.config.base

Environment detection for the cliptails settings layer.

Overview:
- Provides a utility class for detecting the current application environment
    (production, CI, or development) based on an environment variable.
- Exposes module-level constants for the application root directory and the
    environment name, used to locate YAML configuration files.

Contents:
- Classes:
    - AppEnv:
        Class methods to determine the current environment and the application
        root directory.

- Module-level Constants:
    - APP_ROOT (Path): The resolved root directory of the application.
    - APP_ENV (Literal["prod", "ci", "dev"]): The detected application environment.

Environment Detection Logic:
- Priority 1: CLIPTAILS_ENV, then ENVIRONMENT, if set to a known value.
- Priority 2: CI=true selects the CI environment.
- Otherwise the development environment is assumed.
- The root directory is CLIPTAILS_HOME when set, else the working directory.
"""
# endregion
# region Imports
from cliptails.imports import os, Path, Literal

# endregion
# region AppEnv Class


class AppEnv:
    """
    Application environment detection utility.

    Attributes:
        PROD (Literal["prod"]): Constant representing the production environment.
        CI (Literal["ci"]): Constant representing a continuous integration run.
        DEV (Literal["dev"]): Constant representing the development environment.
    """

    PROD: Literal["prod"] = "prod"
    CI: Literal["ci"] = "ci"
    DEV: Literal["dev"] = "dev"

    @classmethod
    def environment(cls) -> Literal["prod", "ci", "dev"]:
        """Determine the current application environment."""
        for var in ("CLIPTAILS_ENV", "ENVIRONMENT"):
            if os.getenv(var) in {cls.PROD, cls.CI, cls.DEV}:
                return os.getenv(var)

        if os.getenv("CI", "").lower() in {"1", "true"}:
            return cls.CI
        return cls.DEV

    @classmethod
    def app_root(cls) -> Path:
        """Get the application root directory."""
        home = os.getenv("CLIPTAILS_HOME")
        if home:
            return Path(home).expanduser().resolve()
        return Path.cwd().resolve()


# endregion
# region Module-level Constants

APP_ROOT: Path = AppEnv.app_root()
"""[Path] Root directory of the application."""
APP_ENV: Literal["prod", "ci", "dev"] = AppEnv.environment()
"""[Literal] Environment type."""
# endregion


__all__ = [
    "APP_ENV",
    "APP_ROOT",
    "AppEnv",
]
