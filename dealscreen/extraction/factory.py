from dealscreen.config.settings import Settings
from dealscreen.extraction.base import BaseDocumentReader, BaseTextExtractor
from dealscreen.extraction.docx_reader import DocxReader
from dealscreen.extraction.extractor import DocumentTextExtractor
from dealscreen.extraction.pdfplumber_reader import PdfPlumberReader
from dealscreen.extraction.pymupdf_reader import PyMuPdfReader


class TextExtractorFactory:
    """Creates the text extractor with the configured PDF engine."""

    PDF_READERS: dict[str, type[BaseDocumentReader]] = {
        "pdfplumber": PdfPlumberReader,
        "pymupdf": PyMuPdfReader,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseTextExtractor:
        engine = settings.pdf_engine.lower()
        reader_cls = cls.PDF_READERS.get(engine)
        if reader_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.PDF_READERS)}"
            )
        return DocumentTextExtractor(pdf_reader=reader_cls(), docx_reader=DocxReader())
