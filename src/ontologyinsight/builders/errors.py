# src/ontologyinsight/builders/errors.py
"""
建構器在插入節點與邊時可能拋出的錯誤。

這些錯誤皆為同步、確定性的資料錯誤，重試不會得到不同結果；
呼叫者應修正輸入資料或呼叫順序。
"""

# 1. 標準庫導入
from collections.abc import Hashable

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
# (無)


class StructureError(Exception):
    """所有建構器錯誤的基底類別。"""

    def __init__(self, node_id: Hashable, message: str):
        super().__init__(message)
        self.node_id = node_id


class DuplicateIdError(StructureError):
    """以已存在的 ID 再次註冊節點。"""

    def __init__(self, node_id: Hashable):
        super().__init__(node_id, f"已存在相同 ID 的節點: {node_id!r}")


class AlreadyHasParentError(StructureError):
    """子節點已有父節點，卻再次被加入為其他節點的子節點。"""

    def __init__(self, node_id: Hashable, parent_id: Hashable):
        super().__init__(node_id, f"節點 {node_id!r} 已有父節點 {parent_id!r}")
        self.parent_id = parent_id


class SelfEdgeError(StructureError):
    """無向邊的兩端解析為同一個節點。"""

    def __init__(self, node_id: Hashable):
        super().__init__(node_id, f"不允許自我連接的邊: {node_id!r}")
