"""Config serializer. Builds the lcec XML configuration document::

    <masters>
      <master idx="0">
        <slave idx="0" type="EK1100" name="D1"/>
        <slave idx="1" type="basic_cia402" vid="0x0000066f" pid="0x60380004" name="D2">
          <!--MADHT1505BA1-->
          <modParam name="enablePP" value="true"/>
        </slave>
      </master>
    </masters>

Elements without children are written self-closing by :mod:`lxml` itself.
"""
import re
from typing import Iterable

from lxml import etree

from ecatconf.slave import Master, Pdo, PdoEntry, SlaveConfig, SyncManager


def _comment(text: str) -> etree._Comment:
    """XML comment. Comments must not contain ``--`` or end with ``-``."""
    return etree.Comment(re.sub('-{2,}', '-', text).rstrip('-'))


def _set_attributes(element: etree._Element, **attrs):
    """Set attributes in given order. None values are omitted."""
    for key, value in attrs.items():
        if value is not None:
            element.set(key, str(value))


def pdo_entry_element(parent: etree._Element, entry: PdoEntry) -> etree._Element:
    element = etree.SubElement(parent, 'pdoEntry')
    _set_attributes(
        element,
        idx=entry.index,
        subIdx=entry.subindex,
        bitLen=entry.bitLen,
        halPin=entry.pinName,
        halType=entry.pinType,
    )
    if entry.label:
        element.append(_comment(entry.label))

    return element


def pdo_element(parent: etree._Element, pdo: Pdo) -> etree._Element:
    element = etree.SubElement(parent, 'pdo', idx=pdo.index)
    if pdo.label:
        element.append(_comment(pdo.label))

    for entry in pdo.entries:
        pdo_entry_element(element, entry)

    return element


def sync_manager_element(parent: etree._Element, sm: SyncManager) -> etree._Element:
    element = etree.SubElement(parent, 'syncManager')
    _set_attributes(element, idx=sm.index, dir=sm.direction or '')
    for pdo in sm.pdos:
        pdo_element(element, pdo)

    return element


def slave_element(parent: etree._Element, config: SlaveConfig) -> etree._Element:
    """Slave element. Identity attributes and comment only if set on config."""
    element = etree.SubElement(parent, 'slave')
    _set_attributes(
        element,
        idx=config.idx,
        type=config.type,
        vid=config.vid,
        pid=config.pid,
        name=config.name,
    )
    if config.comment:
        element.append(_comment(config.comment))

    for sm in config.syncManagers:
        sync_manager_element(element, sm)

    for mp in config.modParams:
        etree.SubElement(element, 'modParam', name=mp.name, value=mp.value)

    return element


def build_document(masters: Iterable[Master]) -> etree._Element:
    """Build document tree. Masters sorted by their numeric index, slaves in
    discovery order.
    """
    root = etree.Element('masters')
    for master in sorted(masters, key=lambda m: int(m.idx)):
        element = etree.SubElement(root, 'master', idx=master.idx)
        for config in master.slaves:
            slave_element(element, config)

    return root


def dumps(masters: Iterable[Master]) -> str:
    """Serialize masters to pretty printed XML string (no XML declaration)."""
    root = build_document(masters)
    return etree.tostring(root, pretty_print=True, encoding='unicode')
