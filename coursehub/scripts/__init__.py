"""
运维脚本包
"""
