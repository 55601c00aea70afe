"""
Shared Hypothesis strategies for property-based tests of the analysis core.
"""
# 说明：属性测试中共享的 Hypothesis 策略集。
# 职责：
# - 生成单列类别集合（长度 0..6，大写字母串或整数取值）及与取值一致的数据类型
# - 生成 Count 的输入属性：类别已知/未知、记录数已知/未知、任意数据类型
# - 生成两种邻接关系的隐私定义与 L-k 范数敏感度空间

import string

from hypothesis import strategies as st

from dpvalidator.core.data import CategorySet, DataType, Property
from dpvalidator.core.privacy import KNorm, Neighboring, PrivacyDefinition


# ------------------------------------------------------------------ Categories
@st.composite
def category_columns(draw, min_size=0, max_size=6):
    # 生成单列、取值互不相同的类别序列；固定字母表避免冷启动时生成过慢
    data_type = draw(st.sampled_from([DataType.STR, DataType.I64]))
    if data_type is DataType.STR:
        elements = st.text(alphabet=string.ascii_uppercase, min_size=1, max_size=4)
    else:
        elements = st.integers(-1000, 1000)
    column = draw(st.lists(elements, min_size=min_size, max_size=max_size, unique=True))
    return column, data_type


# ------------------------------------------------------------------ Properties
@st.composite
def data_properties(draw, categories_known=None, aggregated=False):
    # 组合类别、记录数、列数与数据类型，构造 Count 的 data 输入属性
    known = draw(st.booleans()) if categories_known is None else categories_known
    num_records = draw(st.one_of(st.none(), st.integers(0, 10_000)))
    if known:
        column, data_type = draw(category_columns())
        categories = CategorySet.from_columns([column], data_type=data_type)
        num_columns = 1
    else:
        data_type = draw(st.sampled_from(list(DataType)))
        categories = None
        num_columns = draw(st.one_of(st.none(), st.integers(1, 5)))
    prop = Property(
        data_type=data_type,
        num_records=num_records,
        num_columns=num_columns,
        categories=categories,
    )
    if aggregated:
        from dpvalidator.components import Count

        prop = Count().propagate_property(PrivacyDefinition(), {}, {"data": prop})
    return prop


# ------------------------------------------------------------------ Privacy
@st.composite
def privacy_definitions(draw):
    return PrivacyDefinition(neighboring=draw(st.sampled_from(list(Neighboring))))


@st.composite
def knorms(draw):
    return KNorm(draw(st.integers(1, 4)))
