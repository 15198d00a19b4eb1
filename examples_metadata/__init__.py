"""
examples-metadata - 扩展示例元数据生成工具

构建 examples/ 下的每个示例扩展，汇总依赖、权限和 API 使用情况，
生成供文档站点搜索使用的 metadata.json。
"""

__version__ = "0.1.0"
