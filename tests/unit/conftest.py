import pytest

import xmlmap


USER_XML = """<user id="123" name="John Doe" active="true">
    <email type="primary">john@example.com</email>
    <email type="secondary">john.doe@work.com</email>
    <profile>
        <age>30</age>
        <city>New York</city>
    </profile>
</user>"""

PRODUCT_XML = """<product id="456" name="Widget" available="true">
    <price currency="USD">29.99</price>
    <description>A useful widget</description>
</product>"""

ITEMS_XML = """<items>
    <item id="1">First</item>
    <item id="2">Second</item>
</items>"""

NESTED_XML = """<xml>
  <key attr1="1" attr2="2">
    <value1 attr="x"/>
    <value2 attr="y"/>
    <value3 attr="z">
      <child1 attr="c"/>
    </value3>
  </key>
  <tag attr1="a" attr2="b">tags</tag>
</xml>"""


@pytest.fixture
def user_tree():
    return xmlmap.convert(USER_XML)


@pytest.fixture
def product_tree():
    return xmlmap.convert(PRODUCT_XML)


@pytest.fixture
def items_tree():
    return xmlmap.convert(ITEMS_XML)


@pytest.fixture
def nested_tree():
    return xmlmap.convert(NESTED_XML)
