"""
配置文件加载和管理模块
"""
import argparse
import yaml
from typing import Any, Dict, List, Optional

from ..core.exceptions import ConfigValidationError


LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def load_yaml(path: Optional[str]) -> Dict[str, Any]:
	"""
	加载YAML配置文件

	Args:
		path: 配置文件路径

	Returns:
		解析后的配置字典，如果路径为空、文件不存在或为空则返回空字典
	"""
	if not path:
		return {}
	try:
		with open(path, 'r', encoding='utf-8') as f:
			return yaml.safe_load(f) or {}
	except FileNotFoundError:
		return {}


def deep_update(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
	"""
	深度合并两个字典，将b的键值对合并到a中

	Args:
		a: 目标字典（将被修改）
		b: 源字典（提供新值）

	Returns:
		合并后的字典a
	"""
	for k, v in b.items():
		if isinstance(v, dict) and isinstance(a.get(k), dict):
			a[k] = deep_update(a[k], v)
		else:
			a[k] = v
	return a


def parse_cli_overrides(overrides: Optional[List[str]]) -> Dict[str, Any]:
	"""
	解析命令行覆盖参数，将key=value格式转换为嵌套字典

	使用点号表示嵌套路径，例如：
	["platform=mac", "car.price=69900"]

	Args:
		overrides: 命令行覆盖参数列表

	Returns:
		解析后的嵌套字典结构
	"""
	result: Dict[str, Any] = {}
	for item in overrides or []:
		if '=' not in item:
			continue
		key, val = item.split('=', 1)
		# 尝试转换数字和布尔值类型
		if val.lower() in {"true", "false"}:
			cast_val: Any = val.lower() == "true"
		else:
			try:
				if '.' in val:
					cast_val = float(val)
					if cast_val.is_integer():
						cast_val = int(cast_val)
				else:
					cast_val = int(val)
			except ValueError:
				# 如果无法转换为数字，保持原字符串格式
				cast_val = val
		nodes = key.split('.')
		cur = result
		for n in nodes[:-1]:
			if n not in cur or not isinstance(cur[n], dict):
				cur[n] = {}
			cur = cur[n]
		cur[nodes[-1]] = cast_val
	return result


def load_config(config_path: Optional[str], cli_overrides: Optional[List[str]] = None) -> Dict[str, Any]:
	"""
	加载示例配置：合并YAML配置文件和命令行覆盖参数

	Args:
		config_path: 配置文件路径
		cli_overrides: 命令行覆盖参数列表

	Returns:
		合并后的完整配置字典
	"""
	cfg: Dict[str, Any] = {}
	cfg = deep_update(cfg, load_yaml(config_path))
	if cli_overrides:
		cfg = deep_update(cfg, parse_cli_overrides(cli_overrides))
	return cfg


def build_argparser(description: Optional[str] = None) -> argparse.ArgumentParser:
	"""
	构建命令行参数解析器

	Returns:
		配置好的参数解析器对象
	"""
	parser = argparse.ArgumentParser(description=description)
	parser.add_argument('--config', type=str, default=None, help='demo config yaml')
	parser.add_argument('--override', type=str, nargs='*', default=None, help='dot.notation overrides')
	parser.add_argument('--log-level', type=str, default=None, choices=LOG_LEVELS, help='logging level')
	return parser


def validate_demo_config(cfg: Dict[str, Any]) -> None:
	"""
	验证示例配置的合法性

	Args:
		cfg: 配置字典

	Raises:
		ConfigValidationError: 当配置不符合规则时抛出异常
	"""
	platform_name = cfg.get('platform')
	if platform_name is not None and not isinstance(platform_name, str):
		raise ConfigValidationError(
			f"'platform' must be a string or null, got {type(platform_name).__name__}",
			context={'platform': platform_name}
		)

	car = cfg.get('car')
	if car is not None and not isinstance(car, dict):
		raise ConfigValidationError(
			f"'car' must be a mapping of properties, got {type(car).__name__}",
			context={'car': car}
		)

	logging_cfg = cfg.get('logging') or {}
	if not isinstance(logging_cfg, dict):
		raise ConfigValidationError(
			f"'logging' must be a mapping, got {type(logging_cfg).__name__}",
			context={'logging': logging_cfg}
		)

	level = logging_cfg.get('level')
	if level is not None and str(level).upper() not in LOG_LEVELS:
		raise ConfigValidationError(
			f"Unknown logging level: {level}. Available: {list(LOG_LEVELS)}",
			context={'level': level}
		)
