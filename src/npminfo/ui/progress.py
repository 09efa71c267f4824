"""spinner shown while talking to the registry."""

import sys
from contextlib import contextmanager
from typing import Optional
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn


class ProgressManager:
    """wraps a rich console and only animates when attached to a terminal."""
    
    def __init__(self, console: Optional[Console] = None):
        """
        initialize progress manager.
        
        args:
            console: optional rich console instance. if not provided, creates new one.
        """
        self.console = console or Console()
        self._enabled = self._should_show_progress()
    
    def _should_show_progress(self) -> bool:
        """
        check if we should show the spinner.
        
        returns false in non-interactive environments (ci/cd, piped output).
        """
        return sys.stdout.isatty() and not sys.stdout.closed
    
    @contextmanager
    def spinner(self, description: str, transient: bool = True):
        """
        create an indeterminate spinner for a registry request.
        
        args:
            description: text to display next to spinner
            transient: if true, spinner disappears when done
            
        yields:
            task id for the spinner, or None when not interactive
        """
        if not self._enabled:
            yield None
            return
        
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=self.console,
            transient=transient,
        ) as progress:
            task_id = progress.add_task(description, total=None)
            yield task_id
