"""Progress reporting utilities."""

import sys
from tqdm import tqdm


class ProgressReporter:
    """Progress bar on stderr for manifest fetches."""
    
    def __init__(self, total: int, description: str = "Checking tags", unit: str = "tags",
                 enabled: bool = True):
        self.total = total
        self.description = description
        self.unit = unit
        self.enabled = enabled and sys.stderr.isatty()
        self.progress_bar = None
        self.matched = 0
    
    def start(self):
        """Start progress reporting."""
        if self.enabled:
            self.progress_bar = tqdm(
                total=self.total,
                desc=self.description,
                unit=self.unit,
                file=sys.stderr,
                leave=False
            )
    
    def update(self, matched: bool):
        """Record one checked tag."""
        if matched:
            self.matched += 1
        if self.progress_bar:
            self.progress_bar.set_postfix({'matched': self.matched})
            self.progress_bar.update(1)
    
    def finish(self):
        """Finish progress reporting."""
        if self.progress_bar:
            self.progress_bar.close()
            self.progress_bar = None
    
    def __enter__(self):
        self.start()
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb):
        self.finish()
