"""
抽象工厂模式示例

根据平台名称（命令行参数、配置文件或主机操作系统）选择GUI工厂，
创建应用并绘制其按钮和复选框。

使用示例：
    python scripts/abstract_factory_demo.py --platform mac
"""

import logging
from typing import List, Optional, TextIO

from ..abstractfactory import Application, create_gui_factory, detect_platform_name
from ..core.exceptions import DesignPatternException, ExceptionHandler
from ..utils import build_argparser, load_config, setup_logging, validate_demo_config


logger = logging.getLogger(__name__)


def resolve_platform_name(cli_platform: Optional[str], cfg: dict) -> str:
    """命令行参数优先，其次是配置文件，最后是主机操作系统名称"""
    if cli_platform:
        return cli_platform
    if cfg.get('platform'):
        return cfg['platform']
    return detect_platform_name()


def main(argv: Optional[List[str]] = None, stream: Optional[TextIO] = None) -> Application:
    """主函数：选择GUI工厂并绘制应用"""
    parser = build_argparser("Abstract Factory demo")
    parser.add_argument('--platform', type=str, default=None,
                        help='platform name (windows or mac); defaults to the host OS')
    args = parser.parse_args(argv)

    cfg = load_config(args.config, args.override)
    validate_demo_config(cfg)
    setup_logging(args.log_level or (cfg.get('logging') or {}).get('level'))

    platform_name = resolve_platform_name(args.platform, cfg)
    logger.info(f"Selecting GUI factory for platform: {platform_name}")

    try:
        factory = create_gui_factory(platform_name, stream=stream)
    except DesignPatternException as e:
        ExceptionHandler.handle_exception(e, logger)

    app = Application(factory)
    app.paint()
    return app


if __name__ == '__main__':
    main()
