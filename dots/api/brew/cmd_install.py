"""Install Homebrew packages from the Brewfile."""

from collections.abc import Iterator

from ..config.DotsConfig import DotsConfig
from ..StageResult import StageResult
from .._output_schemas.brew import BrewInstallOutput
from .BrewBundleInstaller import BrewBundleInstaller
from .PackageInstaller import PackageInstaller


def cmd_install(bootstrap: bool = False, installer: PackageInstaller | None = None) -> StageResult:
    """Run `brew bundle` against the configured Brewfile.

    Args:
        bootstrap: Install Homebrew first when it is missing. Without it a
            missing Homebrew is an error.
        installer: PackageInstaller to use (defaults to Homebrew)
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        brewfile = ""
        bootstrapped = False

        def _fail(message: str) -> None:
            result_obj.result = message
            result_obj.output = BrewInstallOutput(
                errors=[message],
                warnings=[],
                brewfile=brewfile,
                bootstrapped=bootstrapped,
                installed=False,
            ).model_dump(mode="python")
            result_obj.success = False

        yield (0.1, "Loading configuration...")
        try:
            config = DotsConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            _fail(str(e))
            return

        brewfile = str(config.source_path(config.brew.brewfile))
        active = installer if installer is not None else BrewBundleInstaller(config.brew)

        yield (0.2, "Checking for Homebrew...")
        if not active.is_available():
            if not bootstrap:
                yield (1.0, "Complete")
                _fail("Homebrew is not installed. Install it first: https://brew.sh")
                return
            yield (0.3, "Installing Homebrew...")
            try:
                active.bootstrap()
            except (RuntimeError, OSError) as e:
                yield (1.0, "Complete")
                _fail(str(e))
                return
            bootstrapped = True

        yield (0.5, "Installing Homebrew packages...")
        try:
            active.install_bundle(config.source_path(config.brew.brewfile))
        except (RuntimeError, OSError) as e:
            yield (1.0, "Complete")
            _fail(str(e))
            return

        yield (1.0, "Complete")
        result_obj.result = "Homebrew packages installed"
        result_obj.output = BrewInstallOutput(
            errors=[],
            warnings=[],
            brewfile=brewfile,
            bootstrapped=bootstrapped,
            installed=True,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Installing Homebrew packages...", progress_callback=do_work)
