import logging
from typing import Dict, List, Optional

from .catalog.operations import CATALOG_MODULES, OPERATIONS
from .errors import SchemaMismatchError
from .model import ModelInfo, ModelSchema, OperationInfo
from .pricing import get_model_pricing

logger = logging.getLogger(__name__)


class ModelRegistry:
    """
    Catalog tĩnh (operation, model_id) -> ModelSchema.
    Build 1 lần lúc import, sau đó chỉ đọc.
    """

    def __init__(self, modules=None, operations=None):
        modules = CATALOG_MODULES if modules is None else modules
        operations = OPERATIONS if operations is None else operations

        self._models: Dict[str, ModelSchema] = {}
        for module in modules:
            for entry in module.MODELS:
                model_id = entry["id"]
                if model_id in self._models:
                    raise ValueError(
                        f"Model {model_id} registered twice "
                        f"({self._models[model_id].operation}, {module.OPERATION})"
                    )
                self._models[model_id] = ModelSchema(operation=module.OPERATION, **entry)

        self._operations: Dict[str, dict] = {}
        for op_id, op in operations.items():
            for model_id in op.get("models", []):
                schema = self._models.get(model_id)
                if schema is not None and schema.operation != op_id:
                    raise ValueError(f"Operation {op_id} lists {model_id}, which belongs to {schema.operation}")
            self._operations[op_id] = op

        logger.debug("[Registry] Loaded %d models across %d operations", len(self._models), len(self._operations))

    def list_operations(self) -> List[OperationInfo]:
        return [
            OperationInfo(
                id=op_id,
                name=op["name"],
                description=op["description"],
                model_count=len(self.get_models_for_operation(op_id)),
            )
            for op_id, op in self._operations.items()
        ]

    def has_operation(self, operation_id: str) -> bool:
        return operation_id in self._operations

    def get_models_for_operation(self, operation_id: str) -> List[ModelInfo]:
        op = self._operations.get(operation_id)
        if op is None:
            return []
        out = []
        for model_id in op.get("models", []):
            schema = self._models.get(model_id)
            if schema is None:
                # model có trong list nhưng chưa khai báo schema -> bỏ qua
                continue
            out.append(self._with_pricing(schema, operation_id))
        return out

    def get_model_config(self, operation_id: str, model_id: str) -> Optional[ModelInfo]:
        schema = self._models.get(model_id)
        if schema is None or schema.operation != operation_id:
            return None
        return self._with_pricing(schema, operation_id)

    def get_schema(self, model_id: str) -> Optional[ModelSchema]:
        return self._models.get(model_id)

    def require_model(self, operation_id: str, model_id: str) -> ModelInfo:
        info = self.get_model_config(operation_id, model_id)
        if info is None:
            raise SchemaMismatchError(operation_id, model_id)
        return info

    @staticmethod
    def _with_pricing(schema: ModelSchema, operation_id: str) -> ModelInfo:
        # thiếu giá không phải lỗi, pricing = None
        return ModelInfo(
            id=schema.id,
            name=schema.name,
            description=schema.description,
            operation=schema.operation,
            parameters=dict(schema.parameters),
            pricing=get_model_pricing(operation_id, schema.id),
            current_operation=operation_id,
        )


registry = ModelRegistry()
