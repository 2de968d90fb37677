"""CANopen over EtherCAT (CoE).

EtherCAT slaves with a mailbox usually expose a CANopen object dictionary.
Addresses are noted as *index* (hex, 16 bit) and *sub-index* (8 bit). Drives
mostly follow the CiA 402 device profile which defines a fixed set of object
dictionary entries (controlword, statusword, supported drive modes, ...).
Multi axis drives repeat the CiA 402 objects for every further axis with an
offset of 0x800.

See Also:
    - `CANopen on Wikipedia <https://en.wikipedia.org/wiki/CANopen>`_
    - `EtherCAT on Wikipedia <https://en.wikipedia.org/wiki/EtherCAT>`_
"""
