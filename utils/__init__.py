"""
utils/ - 通用工具：装饰器与报告生成
"""
