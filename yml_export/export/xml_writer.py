"""
YML XML Writer

Renders a Catalog as a YML document (yml_catalog/shop/...) with
two-space indentation and a fixed UTF-8 declaration line.

Optional elements and attributes with empty values are left out;
mandatory ones are always written, even when blank.
"""

import logging
import os
import xml.etree.ElementTree as ET

from ..common.constants import INDENT, XML_DECLARATION
from ..errors import WriteError
from ..models import Catalog, Category, Currency, Offer, Param

logger = logging.getLogger(__name__)


def _text_element(parent: ET.Element, tag: str, text: str) -> ET.Element:
    element = ET.SubElement(parent, tag)
    element.text = text
    return element


def _optional_element(parent: ET.Element, tag: str, text: str) -> None:
    if text:
        _text_element(parent, tag, text)


class YMLWriter:
    """
    Serializes catalogs to YML.

    Usage:
        writer = YMLWriter()
        writer.write(catalog, "yandex_market.xml")
    """

    def __init__(self, indent: str = INDENT):
        """
        Initialize the writer.

        Args:
            indent: Indentation unit per nesting level
        """
        self.indent = indent

    def currency_to_element(self, currency: Currency) -> ET.Element:
        return ET.Element('currency', {'id': currency.id, 'rate': currency.rate})

    def category_to_element(self, category: Category) -> ET.Element:
        attrs = {'id': category.id}
        if category.parent_id:
            attrs['parentId'] = category.parent_id
        element = ET.Element('category', attrs)
        element.text = category.name
        return element

    def param_to_element(self, param: Param) -> ET.Element:
        attrs = {'name': param.name}
        if param.unit:
            attrs['unit'] = param.unit
        element = ET.Element('param', attrs)
        element.text = param.value
        return element

    def offer_to_element(self, offer: Offer) -> ET.Element:
        """
        Convert an offer to its <offer> element.

        Child order: url, price, currencyId, categoryId, picture*, name,
        vendor, description, sales_notes, param*.
        """
        element = ET.Element('offer', {'id': offer.id, 'available': offer.available})

        _text_element(element, 'url', offer.url)
        _text_element(element, 'price', offer.price)
        _text_element(element, 'currencyId', offer.currency_id)
        _text_element(element, 'categoryId', offer.category_id)
        for picture in offer.pictures:
            _optional_element(element, 'picture', picture)
        _text_element(element, 'name', offer.name)
        _optional_element(element, 'vendor', offer.vendor)
        _optional_element(element, 'description', offer.description)
        _optional_element(element, 'sales_notes', offer.sales_notes)
        for param in offer.params:
            element.append(self.param_to_element(param))

        return element

    def to_element(self, catalog: Catalog) -> ET.Element:
        """
        Build the element tree of a catalog.

        Args:
            catalog: Catalog to render

        Returns:
            Root <yml_catalog> element (not indented)
        """
        root = ET.Element('yml_catalog', {'date': catalog.date})
        shop = ET.SubElement(root, 'shop')

        _text_element(shop, 'name', catalog.shop.name)
        _text_element(shop, 'company', catalog.shop.company)
        _text_element(shop, 'url', catalog.shop.url)

        currencies = ET.SubElement(shop, 'currencies')
        for currency in catalog.currencies:
            currencies.append(self.currency_to_element(currency))

        categories = ET.SubElement(shop, 'categories')
        for category in catalog.categories:
            categories.append(self.category_to_element(category))

        offers = ET.SubElement(shop, 'offers')
        for offer in catalog.offers:
            offers.append(self.offer_to_element(offer))

        return root

    def to_string(self, catalog: Catalog) -> str:
        """
        Render a catalog as a complete XML document.

        Args:
            catalog: Catalog to render

        Returns:
            Declaration line followed by the indented document
        """
        root = self.to_element(catalog)
        ET.indent(root, space=self.indent)
        body = ET.tostring(root, encoding='unicode', short_empty_elements=False)
        return f"{XML_DECLARATION}\n{body}\n"

    def write(self, catalog: Catalog, output_path: str) -> int:
        """
        Write a catalog to a file.

        The document is rendered before the file is opened, so encoding
        problems never leave a truncated file behind.

        Args:
            catalog: Catalog to write
            output_path: Output XML file path

        Returns:
            Number of offers written

        Raises:
            WriteError: If rendering fails or the file cannot be written
        """
        try:
            document = self.to_string(catalog)
        except (TypeError, ValueError) as e:
            raise WriteError(str(output_path), f"XML encoding failed: {e}") from e

        try:
            os.makedirs(os.path.dirname(os.path.abspath(output_path)), exist_ok=True)
            with open(output_path, 'w', encoding='utf-8', newline='\n') as f:
                f.write(document)
        except OSError as e:
            raise WriteError(str(output_path), e.strerror or str(e)) from e

        logger.info("Wrote %d offers to %s", len(catalog.offers), output_path)
        return len(catalog.offers)
