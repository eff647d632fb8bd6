import ntpath
import platform

JAVA_X64_DEFAULT = r"%PROGRAMFILES(X86)%\Java\jre6\bin\java.exe"
JAVA_X86_DEFAULT = r"%PROGRAMFILES%\Java\jre6\bin\java.exe"

_64BIT_MACHINES = {"amd64", "x86_64", "ia64", "arm64", "aarch64"}


def resolve_java_executable(configured: str, machine: str | None = None) -> str:
    """Return the Java binary used to launch the compressor.

    A configured location wins. Otherwise the default install path for the
    host architecture is used, with ``%VAR%`` references expanded. There is
    no further lookup: a wrong path surfaces when the tool is launched.
    """
    if configured:
        return configured
    if machine is None:
        machine = platform.machine()
    default = JAVA_X64_DEFAULT if machine.lower() in _64BIT_MACHINES else JAVA_X86_DEFAULT
    return ntpath.expandvars(default)
