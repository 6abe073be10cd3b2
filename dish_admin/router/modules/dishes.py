from ..types import LazyComponent, RouteConfig, RouteMeta

Layout = LazyComponent(path="layout/index.vue")

dishes = RouteConfig(
    path="/dishes",
    name="Dishes",
    component=Layout,
    redirect="/dishes/list",
    meta=RouteMeta(
        icon="ep:food",
        title="餐品管理",
        rank=2,
    ),
    children=[
        RouteConfig(
            path="/dishes/list",
            name="DishesList",
            component=LazyComponent(path="views/dishes/index.vue"),
            meta=RouteMeta(title="餐品列表"),
        ),
        RouteConfig(
            path="/dishes/category",
            name="DishesCategory",
            component=LazyComponent(path="views/dishes/category.vue"),
            meta=RouteMeta(title="餐品分类"),
        ),
    ],
)
