"""Batch driver: scan a directory and clean every image in it."""

from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from metaclean.cli.reporter import Reporter
from metaclean.core.errors import DirectoryReadError
from metaclean.core.scanner import ImageFile, scan_directory
from metaclean.core.stripper import MetadataStripper, ProcessingOutcome


class BatchProcessor:
    """Clean all supported images directly inside a directory.
    
    Files are independent: a failure is reported and the batch moves on.
    With one worker (the default) files are handled sequentially in scan
    order. More workers fan the files out over a ThreadPoolExecutor; each
    file is still its own task and gets exactly one reported line.
    """
    
    def __init__(
        self,
        stripper: MetadataStripper | None = None,
        reporter: Reporter | None = None,
        workers: int = 1,
    ) -> None:
        """Initialize batch processor.
        
        Args:
            stripper: Stripper used for each file.
            reporter: Receives every outcome as it completes.
            workers: Number of worker threads (1 = sequential).
        """
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        self.stripper = stripper or MetadataStripper()
        self.reporter = reporter or Reporter()
        self.workers = workers
    
    def process_directory(self, directory: Path) -> list[ProcessingOutcome]:
        """Strip metadata from every supported image in a directory.
        
        Args:
            directory: Directory to process (not recursive).
            
        Returns:
            One ProcessingOutcome per scanned file, in completion order.
            
        Raises:
            DirectoryReadError: If the directory cannot be listed. Nothing
                is processed in that case.
        """
        try:
            images = scan_directory(directory)
        except DirectoryReadError as e:
            self.reporter.directory_error(e)
            raise
        
        if not images:
            self.reporter.no_images(Path(directory))
            return []
        
        if self.workers == 1:
            return [self._process_single(image) for image in images]
        
        results: list[ProcessingOutcome] = []
        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            futures = [
                executor.submit(self.stripper.strip, image.path, image.format)
                for image in images
            ]
            for future in as_completed(futures):
                outcome = future.result()
                self.reporter.report(outcome)
                results.append(outcome)
        
        return results
    
    def _process_single(self, image: ImageFile) -> ProcessingOutcome:
        """Process a single image."""
        outcome = self.stripper.strip(image.path, image.format)
        self.reporter.report(outcome)
        return outcome
