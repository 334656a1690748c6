import sys
import time
from collections import OrderedDict, defaultdict
from contextlib import contextmanager


class Timer:
    """Elapsed time probe for memoized calls.

    Supports nested timing contexts so that a run of calls can be reported
    as a total with each individual call underneath it.
    """

    def __init__(self, enabled=False):
        self.enabled = enabled
        self.timings = OrderedDict()  # Operation name -> elapsed time
        self.nested_timings = defaultdict(list)  # Parent -> child names
        self.start_times = {}
        self.operation_stack = []

    def start(self, operation_name):
        """Start timing an operation."""
        if not self.enabled:
            return

        self.start_times[operation_name] = time.perf_counter()
        if self.operation_stack:
            self.nested_timings[self.operation_stack[-1]].append(operation_name)
        self.operation_stack.append(operation_name)

    def stop(self, operation_name):
        """Stop timing an operation and record elapsed time."""
        if not self.enabled or operation_name not in self.start_times:
            return 0.0

        elapsed = time.perf_counter() - self.start_times.pop(operation_name)
        self.timings[operation_name] = elapsed
        if self.operation_stack and self.operation_stack[-1] == operation_name:
            self.operation_stack.pop()
        return elapsed

    @contextmanager
    def time_operation(self, operation_name):
        self.start(operation_name)
        try:
            yield
        finally:
            self.stop(operation_name)

    def get_elapsed(self, operation_name):
        return self.timings.get(operation_name, 0.0)

    def format_time(self, seconds):
        """Format time in microseconds for precision."""
        microseconds = seconds * 1_000_000
        if microseconds < 1000:
            return f"{microseconds:.0f}µs"
        elif microseconds < 1_000_000:
            return f"{microseconds / 1000:.1f}ms"
        elif seconds < 60.0:
            return f"{seconds:.1f}s"
        else:
            minutes = int(seconds // 60)
            secs = seconds % 60
            return f"{minutes}m{secs:.1f}s"

    def _top_level(self):
        nested = set()
        for children in self.nested_timings.values():
            nested.update(children)
        return [op for op in self.timings if op not in nested]

    def total(self):
        """Sum of the top level operations so nested ones aren't counted twice."""
        return sum(self.timings[op] for op in self._top_level())

    def report(self, verbose_level, file=None):
        """Total elapsed time, then the per operation breakdown from verbose 2."""
        if not self.enabled or not self.timings:
            return

        if file is None:
            file = sys.stderr

        print(f"Total elapsed time: {self.format_time(self.total())}", file=file)
        if verbose_level >= 2:
            for op_name in self._top_level():
                self._report_operation(op_name, file, 1)

    def _report_operation(self, op_name, file, indent):
        print(f"{'  ' * indent}{op_name}: {self.format_time(self.timings[op_name])}", file=file)
        for child_name in self.nested_timings.get(op_name, []):
            if child_name in self.timings:
                self._report_operation(child_name, file, indent + 1)
