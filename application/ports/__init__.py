"""
Storage Interfaces (Ports) for the PulseFlow planner.

This package defines abstract interfaces that decouple the schedule engine
from infrastructure (local files, in-memory stores). Implementations are
provided in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the engine needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import ScheduleStorage

    class PersistenceReconciler:
        def __init__(self, storage: ScheduleStorage):
            self.storage = storage
"""

# Persisted schedule slot
from application.ports.schedule_storage import ScheduleStorage

__all__ = [
    "ScheduleStorage",
]
