"""
核心组件包 - 配置、日志、异常与内存存储
"""
