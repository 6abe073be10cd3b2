"""
餐品管理模块
- api.dishes: 餐品与餐品分类的异步API函数
- router.modules.dishes: 餐品管理菜单路由配置
"""

__version__ = "1.0.0"
