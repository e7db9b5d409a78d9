"""
CourseHub 课程市场核心数据服务
"""

__version__ = "1.0.0"
