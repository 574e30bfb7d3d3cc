"""
1 record / model: protocol + poll policy + mapper + extractor.
Build 1 lần từ catalog, tra theo model_id.
"""
from dataclasses import dataclass
from typing import Dict, Optional

from .extractors import Extractor, extractor_for
from .jobs import QueuePolicy
from .mappers import Mapper, mapper_for
from .model import Protocol
from .registry import ModelRegistry, registry

# Operation nào đi queue (submit/poll/fetch), còn lại subscribe
QUEUE_POLICIES: Dict[str, QueuePolicy] = {
    "image-to-image": QueuePolicy(interval=1.0, max_polls=30),
    "image-to-3d": QueuePolicy(interval=2.0, max_polls=300),
}


@dataclass(frozen=True)
class ModelStrategy:
    model_id: str
    operation: str
    protocol: Protocol
    mapper: Mapper
    extractor: Extractor
    policy: Optional[QueuePolicy] = None


def build_strategies(reg: ModelRegistry) -> Dict[str, ModelStrategy]:
    out = {}
    for op in reg.list_operations():
        policy = QUEUE_POLICIES.get(op.id)
        for info in reg.get_models_for_operation(op.id):
            out[info.id] = ModelStrategy(
                model_id=info.id,
                operation=op.id,
                protocol="queue" if policy else "subscribe",
                mapper=mapper_for(op.id, info.id),
                extractor=extractor_for(op.id, info.id),
                policy=policy,
            )
    return out


STRATEGIES = build_strategies(registry)


def get_strategy(model_id: str) -> Optional[ModelStrategy]:
    return STRATEGIES.get(model_id)
