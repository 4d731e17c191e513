"""
Extraction service that orchestrates text acquisition, parsing and validation.
"""
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Dict, Any, Optional, Sequence

from apparel_extractor.config import ExtractionSettings
from apparel_extractor.extractors import PDFTextExtractor, PlainTextExtractor, TextExtractor
from apparel_extractor.models import ExtractionResult, PageInfo, Statistics
from apparel_extractor.parsers import SpecificationParser
from apparel_extractor.utils.helpers import combine_pages_lines, get_statistics
from .confidence import ConfidenceValidator

logger = logging.getLogger(__name__)


class ExtractionStrategy(ABC):
    """Abstract base class for extraction strategies."""

    @abstractmethod
    def extract(
        self,
        pages_data: List[Dict[str, Any]],
        source: str,
        source_kind: str = 'text'
    ) -> ExtractionResult:
        """
        Extract data from pages.

        Args:
            pages_data: List of page dictionaries with 'page_num' and 'lines'
            source: Path or label of the source document
            source_kind: 'pdf' or 'text'

        Returns:
            ExtractionResult
        """
        pass

    @abstractmethod
    def get_statistics(self, pages_data: List[Dict[str, Any]]) -> Statistics:
        """Calculate and return statistics."""
        pass


class SpecificationExtractionStrategy(ExtractionStrategy):
    """Strategy for fabric/trim specification documents."""

    def __init__(self, parser: SpecificationParser, validator: ConfidenceValidator):
        """
        Initialize the specification strategy.

        Args:
            parser: SpecificationParser instance
            validator: ConfidenceValidator instance
        """
        self.parser = parser
        self.validator = validator

    def extract(
        self,
        pages_data: List[Dict[str, Any]],
        source: str,
        source_kind: str = 'text'
    ) -> ExtractionResult:
        """Extract fabrics and trims from pages and score the result."""
        lines = combine_pages_lines(pages_data)
        inventory = self.parser.parse(lines)
        report = self.validator.validate(inventory.items)

        logger.info(
            "%s: %d item(s), confidence %d%%, %d warning(s)",
            source, report.total_items, report.confidence_score, report.warnings_count
        )

        return ExtractionResult(
            source=str(source),
            source_kind=source_kind,
            fabrics=inventory.fabrics,
            trims=inventory.trims,
            validation=report,
            statistics=self.get_statistics(pages_data),
            pages=self._create_page_infos(pages_data) if source_kind == 'pdf' else [],
        )

    def _create_page_infos(self, pages_data: List[Dict[str, Any]]) -> List[PageInfo]:
        page_infos = []
        for page in pages_data:
            text_preview = '\n'.join(page.get('lines', []))
            if len(text_preview) > 200:
                text_preview = text_preview[:200] + '...'
            page_infos.append(PageInfo(
                page_num=page.get('page_num', 1),
                line_count=len(page.get('lines', [])),
                text_preview=text_preview or None,
            ))
        return page_infos

    def get_statistics(self, pages_data: List[Dict[str, Any]]) -> Statistics:
        """Calculate statistics."""
        return Statistics(**get_statistics(pages_data))


class ExtractionService:
    """Service class that orchestrates document extraction."""

    def __init__(
        self,
        extractor: TextExtractor,
        strategy: ExtractionStrategy
    ):
        """
        Initialize extraction service.

        Args:
            extractor: TextExtractor producing the document lines
            strategy: ExtractionStrategy to use
        """
        self.extractor = extractor
        self.strategy = strategy

    def extract(self, path: str | Path, show_progress: bool = False) -> ExtractionResult:
        """
        Extract items from a document on disk.

        Args:
            path: Path to a PDF or text file
            show_progress: Whether to print per-page progress

        Returns:
            ExtractionResult

        Raises:
            ReadFailure, AcquisitionFailure: the document text could not be obtained
        """
        pages_data = self.extractor.extract_pages(path, show_progress=show_progress)
        return self.strategy.extract(pages_data, str(path), source_kind=self.extractor.source_kind)

    def extract_lines(self, lines: Sequence[str], source: str = '<lines>') -> ExtractionResult:
        """Extract items from lines that were acquired elsewhere."""
        pages_data = [{'page_num': 1, 'lines': list(lines)}]
        return self.strategy.extract(pages_data, source, source_kind='text')

    def extract_text(self, text: str, source: str = '<text>') -> ExtractionResult:
        """Extract items from a document given as one string."""
        return self.extract_lines(text.split('\n'), source=source)

    def get_summary(self, result: ExtractionResult) -> Dict[str, Any]:
        """Get summary information from an extraction result."""
        report = result.validation
        return {
            'total_items': report.total_items,
            'fabrics': len(result.fabrics),
            'trims': len(result.trims),
            'items_with_suppliers': report.items_with_suppliers,
            'items_without_suppliers': report.items_without_suppliers,
            'confidence_score': report.confidence_score,
            'warnings': report.warnings_count,
            'pages_processed': result.statistics.total_pages,
        }


class ExtractionServiceFactory:
    """Factory class for creating extraction services."""

    @staticmethod
    def create_pdf_service(settings: Optional[ExtractionSettings] = None) -> ExtractionService:
        """
        Create extraction service for PDF documents.

        Args:
            settings: Tunable extraction settings (defaults when omitted)

        Returns:
            ExtractionService reading PDFs with pdfplumber
        """
        settings = settings or ExtractionSettings()
        extractor = PDFTextExtractor(
            row_tolerance=settings.row_tolerance,
            gap_threshold=settings.gap_threshold,
        )
        return ExtractionService(
            extractor=extractor,
            strategy=ExtractionServiceFactory._create_strategy(settings),
        )

    @staticmethod
    def create_text_service(settings: Optional[ExtractionSettings] = None) -> ExtractionService:
        """
        Create extraction service for plain-text documents.

        Args:
            settings: Tunable extraction settings (defaults when omitted)

        Returns:
            ExtractionService reading UTF-8 text files
        """
        settings = settings or ExtractionSettings()
        return ExtractionService(
            extractor=PlainTextExtractor(),
            strategy=ExtractionServiceFactory._create_strategy(settings),
        )

    @staticmethod
    def create_for_path(
        path: str | Path,
        settings: Optional[ExtractionSettings] = None
    ) -> ExtractionService:
        """Pick the PDF or plain-text service from the file suffix."""
        if Path(path).suffix.lower() == '.pdf':
            return ExtractionServiceFactory.create_pdf_service(settings)
        return ExtractionServiceFactory.create_text_service(settings)

    @staticmethod
    def _create_strategy(settings: ExtractionSettings) -> SpecificationExtractionStrategy:
        return SpecificationExtractionStrategy(
            parser=SpecificationParser(settings),
            validator=ConfidenceValidator(),
        )
