"""
运行时快照文件加载器
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from ..exceptions import SnapshotFormatError
from ..models.runtime import Execution, EventSubscription, Job, JobDefinition
from .repository import InMemoryRuntimeQueryService


logger = logging.getLogger(__name__)


class SnapshotLoader:
    """把 YAML/JSON 快照加载为内存查询服务"""

    def __init__(self):
        self.parsers = {
            'yaml': self._parse_yaml,
            'yml': self._parse_yaml,
            'json': self._parse_json
        }

    def load(self, source: Union[str, Path, Dict[str, Any]]) -> InMemoryRuntimeQueryService:
        """
        加载运行时快照

        Args:
            source: 快照文件路径或已解析的字典

        Returns:
            InMemoryRuntimeQueryService: 填充了快照数据的查询服务
        """
        if isinstance(source, dict):
            return self.load_dict(source)

        if isinstance(source, (str, Path)):
            return self.load_file(Path(source))

        raise SnapshotFormatError(f"Unsupported source type: {type(source)}")

    def load_file(self, file_path: Path) -> InMemoryRuntimeQueryService:
        """加载快照文件"""
        suffix = file_path.suffix.lower().lstrip('.')
        if suffix not in self.parsers:
            raise SnapshotFormatError(f"Unsupported file format: {suffix}")

        with open(file_path, 'r', encoding='utf-8') as f:
            content = f.read()

        data = self.parsers[suffix](content)
        logger.debug(f"Loaded snapshot file {file_path}")
        return self.load_dict(data)

    def load_dict(self, data: Dict[str, Any]) -> InMemoryRuntimeQueryService:
        """从字典加载快照"""
        if not isinstance(data, dict):
            raise SnapshotFormatError("Snapshot must be a mapping")

        service = InMemoryRuntimeQueryService()
        default_instance_id = data.get('process_instance_id')

        for item in self._section(data, 'executions'):
            execution_id = self._require(item, 'id', 'executions')
            process_instance_id = item.get('process_instance_id', default_instance_id)
            if process_instance_id is None:
                raise SnapshotFormatError(
                    f"Execution '{execution_id}' has no process_instance_id "
                    f"and the snapshot declares no default"
                )

            service.add_execution(Execution(
                id=str(execution_id),
                process_instance_id=str(process_instance_id),
                parent_id=self._optional_str(item.get('parent_id')),
                activity_id=item.get('activity_id'),
                transition_id=item.get('transition_id')
            ))

            variables = item.get('variables') or {}
            if not isinstance(variables, dict):
                raise SnapshotFormatError(f"Variables of execution '{execution_id}' must be a mapping")
            for name, value in variables.items():
                service.set_variable_local(str(execution_id), str(name), value)

        for item in self._section(data, 'event_subscriptions'):
            service.add_event_subscription(EventSubscription(
                id=str(self._require(item, 'id', 'event_subscriptions')),
                execution_id=str(self._require(item, 'execution_id', 'event_subscriptions')),
                event_name=item.get('event_name'),
                activity_id=item.get('activity_id'),
                event_type=item.get('event_type')
            ))

        for item in self._section(data, 'jobs'):
            service.add_job(Job(
                id=str(self._require(item, 'id', 'jobs')),
                execution_id=str(self._require(item, 'execution_id', 'jobs')),
                job_definition_id=self._optional_str(item.get('job_definition_id'))
            ))

        for item in self._section(data, 'job_definitions'):
            service.add_job_definition(JobDefinition(
                id=str(self._require(item, 'id', 'job_definitions')),
                job_type=self._require(item, 'job_type', 'job_definitions'),
                job_configuration=item.get('job_configuration'),
                activity_id=item.get('activity_id')
            ))

        return service

    def _section(self, data: Dict[str, Any], name: str) -> List[Dict[str, Any]]:
        items = data.get(name) or []
        if not isinstance(items, list):
            raise SnapshotFormatError(f"Section '{name}' must be a list")
        for item in items:
            if not isinstance(item, dict):
                raise SnapshotFormatError(f"Entries of section '{name}' must be mappings")
        return items

    def _require(self, item: Dict[str, Any], key: str, section: str) -> Any:
        if item.get(key) is None:
            raise SnapshotFormatError(f"Entry in section '{section}' is missing '{key}'")
        return item[key]

    def _optional_str(self, value: Any) -> Optional[str]:
        return None if value is None else str(value)

    def _parse_yaml(self, content: str) -> Dict[str, Any]:
        """解析YAML格式"""
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise SnapshotFormatError(f"Failed to parse YAML: {e}")

    def _parse_json(self, content: str) -> Dict[str, Any]:
        """解析JSON格式"""
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise SnapshotFormatError(f"Failed to parse JSON: {e}")
