"""
Critical path method for parallel precedence-constrained job scheduling.

Each job i becomes two vertices, a start i and an end i + n, joined by an
edge weighted with the job's duration. A virtual source s = 2n feeds every
start and every end drains into a virtual sink t = 2n + 1; "i must finish
before j starts" is a zero-weight edge from the end of i to the start of j.
The longest path from s to each start vertex is the earliest start time of
that job, and the longest path to t is the length of the whole schedule.

References:
    - Sedgewick, Wayne. "Algorithms", 4th ed. Section 4.4 (CPM).
"""

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from ..core.digraph import EdgeWeightedDigraph
from ..core.edge import DirectedEdge
from ..logging import get_logger
from ..shortest.acyclic import AcyclicLP

logger = get_logger(__name__)


@dataclass(frozen=True)
class Job:
    """
    A job to schedule.

    Attributes:
        duration: Processing time (non-negative).
        successors: Jobs that may only start once this one has finished.
    """

    duration: float
    successors: Tuple[int, ...] = field(default_factory=tuple)


def parse_jobs(text: str) -> List[Job]:
    """
    Parse the job list format.

    The first line holds the job count n; each of the next n lines holds a
    duration followed by zero or more successor indices.

    Args:
        text: Job list text.

    Returns:
        The jobs, in index order.

    Raises:
        ValueError: If the count is missing, fewer than n job lines follow,
            or a token is not a number.
    """
    lines = [line for line in text.splitlines() if line.strip()]
    if not lines:
        raise ValueError("Job list is empty")

    try:
        n = int(lines[0].strip())
    except ValueError:
        raise ValueError(f"Invalid job count: {lines[0].strip()!r}")
    if len(lines) - 1 < n:
        raise ValueError(f"Expected {n} job lines, found {len(lines) - 1}")

    jobs = []
    for i, line in enumerate(lines[1:n + 1]):
        fields = line.split()
        try:
            duration = float(fields[0])
            successors = tuple(int(token) for token in fields[1:])
        except ValueError:
            raise ValueError(f"Invalid line for job {i}: {line.strip()!r}")
        jobs.append(Job(duration, successors))
    return jobs


class CriticalPathSchedule:
    """
    Earliest start times for a set of jobs with precedence constraints.

    Args:
        jobs: Jobs in index order; successor indices refer to this list.

    Raises:
        ValueError: If a duration is negative, a successor index is out of
            range, or the precedence constraints are circular.

    Example:
        >>> schedule = CriticalPathSchedule([Job(3.0, (1,)), Job(2.0)])
        >>> schedule.start_time(1)
        3.0
        >>> schedule.finish_time()
        5.0
    """

    def __init__(self, jobs: Sequence[Job]):
        n = len(jobs)
        if n == 0:
            raise ValueError("At least one job is required")

        self.n = n
        self.source = 2 * n
        self.sink = 2 * n + 1
        self.graph = EdgeWeightedDigraph(2 * n + 2)

        for i, job in enumerate(jobs):
            if job.duration < 0:
                raise ValueError(f"Job {i} has negative duration {job.duration}")
            self.graph.add_edge(DirectedEdge(i, i + n, job.duration))
            self.graph.add_edge(DirectedEdge(self.source, i, 0.0))
            self.graph.add_edge(DirectedEdge(i + n, self.sink, 0.0))
            for j in job.successors:
                if not 0 <= j < n:
                    raise ValueError(f"Job {i} lists successor {j}, outside [0, {n})")
                self.graph.add_edge(DirectedEdge(i + n, j, 0.0))

        try:
            self._lp = AcyclicLP(self.graph, self.source)
        except ValueError as exc:
            raise ValueError("Precedence constraints contain a cycle") from exc

        logger.debug("Scheduled %d jobs, finish time %s", n, self.finish_time())

    def _validate_job(self, i: int) -> None:
        if not 0 <= i < self.n:
            raise ValueError(f"Invalid job {i}: must be in [0, {self.n})")

    def start_time(self, i: int) -> float:
        """Earliest start time of job i."""
        self._validate_job(i)
        return self._lp.dist_to(i)

    def start_times(self) -> List[float]:
        return [self._lp.dist_to(i) for i in range(self.n)]

    def finish_time(self) -> float:
        """Completion time of the whole schedule."""
        return self._lp.dist_to(self.sink)

    def critical_path(self) -> List[int]:
        """Return the jobs on a longest source-to-sink path, in order."""
        return [e.from_ for e in self._lp.path_to(self.sink) if e.from_ < self.n]

    def format_schedule(self) -> str:
        """Render start times and the finish time, one line each."""
        lines = [f"{i:4d}: {self._lp.dist_to(i):5.1f}" for i in range(self.n)]
        lines.append(f"Finish time: {self.finish_time():5.1f}")
        return "\n".join(lines) + "\n"


def schedule_from_string(text: str) -> CriticalPathSchedule:
    """Parse the job list format and schedule it."""
    return CriticalPathSchedule(parse_jobs(text))
