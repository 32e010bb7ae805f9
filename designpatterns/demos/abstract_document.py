"""
抽象文档模式示例

创建一辆带有初始属性的汽车，然后动态添加新属性。

使用示例：
    python scripts/abstract_document_demo.py --override car.price=69900
"""

import logging
from typing import List, Optional

from ..abstractdocument import Car, Property
from ..utils import build_argparser, load_config, setup_logging, validate_demo_config


logger = logging.getLogger(__name__)

DEFAULT_CAR_PROPERTIES = {
    Property.MODEL.value: "Tesla Model S",
    Property.PRICE.value: 79900,
}


def main(argv: Optional[List[str]] = None) -> Car:
    """主函数：构建汽车文档并动态添加颜色属性"""
    parser = build_argparser("Abstract Document demo")
    args = parser.parse_args(argv)

    cfg = load_config(args.config, args.override)
    validate_demo_config(cfg)
    setup_logging(args.log_level or (cfg.get('logging') or {}).get('level'))

    car_props = dict(DEFAULT_CAR_PROPERTIES)
    car_props.update(cfg.get('car') or {})

    car = Car(car_props)
    # 动态添加新属性
    car.put(Property.COLOR.value, "red")

    logger.info(f"Model: {car.get_model()}")
    logger.info(f"Price: {car.get_price()}")
    logger.info(f"Color: {car.get_color()}")
    logger.info(f"Car document: {car}")
    return car


if __name__ == '__main__':
    main()
