from sqlalchemy import Boolean, Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from db.base import Base


class TreeNodeRecord(Base):
    __tablename__ = "tree_nodes"

    id = Column(Integer, primary_key=True)

    parent_id = Column(Integer, ForeignKey("tree_nodes.id"), nullable=True, index=True)

    # order among siblings
    position = Column(Integer, nullable=False, default=0)

    label = Column(String, nullable=False)

    value = Column(String, nullable=False)

    is_open = Column(Boolean, nullable=False, default=False)

    parent = relationship(
        "TreeNodeRecord",
        remote_side=[id],
        back_populates="children",
    )
    children = relationship(
        "TreeNodeRecord",
        back_populates="parent",
        cascade="all, delete-orphan",
        order_by="TreeNodeRecord.position",
    )
