"""
XML exporter for table documents.

Builds a w:document from sections and tables, and serializes single
table fragments.
"""

import xml.etree.ElementTree as ET
from typing import Any, Dict, Iterable, List, Optional, Union
from pathlib import Path
import logging

from .base_writer import AbstractWriter, W_NS, qn
from .element_writers import ContainerWriter, TableWriter
from ..config import ExportConfig
from ..exceptions import ExportError
from ..layout.section import Section
from ..models.table import Table

logger = logging.getLogger(__name__)

Exportable = Union[Section, Table, Iterable[Section]]


class XMLExporter:
    """
    Generates WordprocessingML for sections and tables.

    Accepts a Section, a list of sections, or a bare Table (written into
    an anonymous body without page geometry).
    """

    def __init__(self, document: Exportable, config: Optional[ExportConfig] = None):
        """
        Initialize XML exporter.

        Args:
            document: Section, list of sections or table to export
            config: Export configuration (defaults when omitted)
        """
        if document is None:
            raise ValueError("Document cannot be None")

        self.document = document
        self.config = config or ExportConfig()

        # Register namespace to preserve the prefix in ET.tostring
        ET.register_namespace(self.config.namespace_prefix, W_NS)

        logger.debug("XML exporter initialized")

    def _sections(self) -> List[Any]:
        document = self.document
        if isinstance(document, (Section, Table)):
            return [document]
        items = list(document)
        for item in items:
            if not isinstance(item, (Section, Table)):
                raise ExportError(f"Cannot export {type(item).__name__}", "expected Section or Table")
        return items

    def export(self, output_path: Union[str, Path]) -> bool:
        """
        Export document to XML.

        Args:
            output_path: Output file path

        Returns:
            True if export successful, False otherwise
        """
        try:
            output_path = Path(output_path)
            output_path.parent.mkdir(parents=True, exist_ok=True)

            xml_content = self.regenerate_wordml()

            with open(output_path, 'w', encoding=self.config.encoding) as f:
                f.write(xml_content)

            logger.info(f"Document exported to XML: {output_path}")
            return True

        except (OSError, UnicodeError) as e:
            logger.error(f"Failed to export document to XML: {e}")
            return False

    def regenerate_wordml(self) -> str:
        """
        Generate the w:document XML.

        Returns:
            WordML XML string
        """
        root = ET.Element(qn('document'))
        body = ET.SubElement(root, qn('body'))

        sections = self._sections()
        for index, section in enumerate(sections):
            if isinstance(section, Table):
                TableWriter(body, section, self.config.redistribute_margins).write()
                continue

            ContainerWriter(body, section, self.config.redistribute_margins).write()

            if section.style is not None:
                # sectPr of all sections but the last lives in a paragraph
                if index < len(sections) - 1:
                    p = ET.SubElement(body, qn('p'))
                    p_pr = ET.SubElement(p, qn('pPr'))
                    self._export_sect_pr(p_pr, section)
                else:
                    self._export_sect_pr(body, section)

        return self.format_xml_output(root)

    def export_table_xml(self, table: Table) -> str:
        """
        Export a single table as an XML fragment.

        The fragment includes the margin spacer paragraphs, so it is wrapped
        in a w:body element. Empty string for a table without rows.
        """
        body = ET.Element(qn('body'))
        TableWriter(body, table, self.config.redistribute_margins).write()
        if len(body) == 0:
            return ""
        return self._serialize(body)

    def _export_sect_pr(self, parent: ET.Element, section: Section) -> None:
        style = section.style
        sect_pr = ET.SubElement(parent, qn('sectPr'))

        pg_sz = ET.SubElement(sect_pr, qn('pgSz'))
        AbstractWriter._set_length(pg_sz, 'w', style.page_size_w)
        AbstractWriter._set_length(pg_sz, 'h', style.page_size_h)
        if style.orientation.value == 'landscape':
            AbstractWriter._set_attr(pg_sz, 'orient', 'landscape')

        pg_mar = ET.SubElement(sect_pr, qn('pgMar'))
        margins: Dict[str, Any] = {
            'top': style.margin_top,
            'right': style.margin_right,
            'bottom': style.margin_bottom,
            'left': style.margin_left,
        }
        for key, value in margins.items():
            AbstractWriter._set_length(pg_mar, key, value)

    def _serialize(self, element: ET.Element) -> str:
        if self.config.pretty_print:
            ET.indent(element, space=' ' * self.config.indent)
        return ET.tostring(element, encoding='unicode')

    def format_xml_output(self, root: ET.Element) -> str:
        """
        Serialize a document element with its XML declaration.

        Compact by default, matching what Word writes; indented when the
        configuration asks for pretty printing.
        """
        formatted_xml = self._serialize(root)
        encoding = 'UTF-8' if self.config.encoding.lower() == 'utf-8' else self.config.encoding
        return f'<?xml version="1.0" encoding="{encoding}" standalone="yes"?>\n{formatted_xml}'

    @staticmethod
    def validate_xml(xml_content: str) -> bool:
        """Check that the content is well-formed XML."""
        try:
            ET.fromstring(xml_content)
            return True
        except ET.ParseError:
            return False

    def get_export_info(self) -> Dict[str, Any]:
        """Get export information."""
        return {
            'exporter_type': 'XML',
            'namespace': W_NS,
            'config': self.config.to_dict(),
            'document_type': type(self.document).__name__,
        }
