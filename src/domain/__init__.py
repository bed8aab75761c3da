"""Fuel App domain: what happened and to whom.

- entities/: Ban records, user reports, proposal statistics, price proposals
- value_objects/: Snapshots carried by events, outbound notification messages
- events/: Side-effect triggering events and their handler registry
- protocols/: Ports for repositories, cache, event bus, notifications, logging

Nothing here imports from infrastructure or any third-party library.
"""
