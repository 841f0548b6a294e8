"""Process counts and GPU process listing."""

from __future__ import annotations

import json
import os
import re
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

DEFAULT_PROC_PATH = Path("/proc")
PAGE_SIZE = 4096

_UINT_RE = re.compile(r"\+?[0-9]+")
_U32_MAX = 2**32 - 1
_U64_MAX = 2**64 - 1

PathLike = Union[str, Path]


@dataclass
class ProcessInfo:
    """A process seen on the GPU."""

    pid: int = 0
    name: str = ""
    gpu_usage: float = 0.0
    memory: int = 0
    command: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "pid": self.pid,
            "name": self.name,
            "gpu_usage": self.gpu_usage,
            "memory": self.memory,
            "command": self.command,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProcessInfo":
        return cls(
            pid=int(data["pid"]),
            name=str(data["name"]),
            gpu_usage=float(data["gpu_usage"]),
            memory=int(data["memory"]),
            command=str(data["command"]),
        )


@dataclass
class ProcessStats:
    """Number of running processes and those using the GPU."""

    total_processes: int = 0
    gpu_processes: list[ProcessInfo] = field(default_factory=list)

    def to_json(self) -> str:
        return json.dumps(
            {
                "total_processes": self.total_processes,
                "gpu_processes": [proc.to_dict() for proc in self.gpu_processes],
            }
        )

    @classmethod
    def from_json(cls, text: str) -> "ProcessStats":
        data = json.loads(text)
        return cls(
            total_processes=int(data["total_processes"]),
            gpu_processes=[ProcessInfo.from_dict(p) for p in data["gpu_processes"]],
        )


def _parse_uint(text: str, limit: int) -> Optional[int]:
    if not _UINT_RE.fullmatch(text):
        return None
    value = int(text)
    return value if value <= limit else None


def _parse_float(text: str) -> Optional[float]:
    if "_" in text or text != text.strip():
        return None
    try:
        return float(text)
    except ValueError:
        return None


def parse_pmon_output(output: str) -> list[ProcessInfo]:
    """Parse the text printed by ``nvidia-smi pmon``; the two header lines are skipped."""
    processes = []
    for line in output.splitlines()[2:]:
        if not line.strip() or line.startswith("#") or line.startswith("gpu"):
            continue
        parts = line.split()
        if len(parts) < 5:
            continue
        pid = _parse_uint(parts[1], _U32_MAX)
        usage = _parse_float(parts[3])
        processes.append(
            ProcessInfo(
                pid=pid if pid is not None else 0,
                name=parts[2],
                gpu_usage=usage if usage is not None else 0.0,
                memory=0,
                command=" ".join(parts),
            )
        )
    return processes


def get_gpu_processes() -> list[ProcessInfo]:
    """Run ``nvidia-smi pmon -c 1`` and parse its output.

    Raises OSError when the tool cannot be started.
    """
    result = subprocess.run(
        ["nvidia-smi", "pmon", "-c", "1"],
        capture_output=True,
        check=False,
    )
    return parse_pmon_output(result.stdout.decode("utf-8", errors="replace"))


def count_total_processes(proc_path: PathLike = DEFAULT_PROC_PATH) -> int:
    """Count the numeric directories under proc_path."""
    try:
        entries = list(Path(proc_path).iterdir())
    except OSError:
        return 0
    return sum(1 for entry in entries if entry.is_dir() and entry.name.isnumeric())


def has_gpu_device_fd(pid: int, proc_path: PathLike = DEFAULT_PROC_PATH) -> bool:
    """Whether the process holds an open file on an NVIDIA device."""
    fd_path = Path(proc_path) / str(pid) / "fd"
    if not fd_path.exists():
        return False
    try:
        entries = list(fd_path.iterdir())
    except OSError:
        return False
    for entry in entries:
        try:
            target = os.readlink(entry)
        except OSError:
            continue
        if "nvidia" in target or "nvrm" in target:
            return True
    return False


def get_process_memory(pid: int, proc_path: PathLike = DEFAULT_PROC_PATH) -> int:
    """Resident set size of the process in bytes, or 0 when unknown."""
    statm_path = Path(proc_path) / str(pid) / "statm"
    try:
        content = statm_path.read_text()
    except (OSError, UnicodeDecodeError):
        return 0
    parts = content.split()
    if len(parts) < 2:
        return 0
    pages = _parse_uint(parts[1], _U64_MAX)
    return (pages or 0) * PAGE_SIZE


def read_process_stats(proc_path: PathLike = DEFAULT_PROC_PATH) -> ProcessStats:
    """Collect process statistics; GPU processes are empty if nvidia-smi is missing."""
    stats = ProcessStats()
    try:
        stats.gpu_processes = get_gpu_processes()
    except OSError:
        pass
    stats.total_processes = count_total_processes(proc_path)
    return stats