# backoffice/models/order.py
from sqlalchemy import Column, ForeignKey, Integer, Numeric, String, TIMESTAMP, func
from sqlalchemy.orm import relationship

from backoffice.database import Base


class Customer(Base):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True)
    firstname = Column(String(255), nullable=False)
    lastname = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True)

    orders = relationship("Order", back_populates="customer")


class OrderState(Base):
    __tablename__ = "order_states"

    id = Column(Integer, primary_key=True)
    name = Column(String(64), nullable=False, unique=True)
    color = Column(String(32), nullable=False, default="#32CD32")

    orders = relationship("Order", back_populates="current_state")


class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    reference = Column(String(9), nullable=False, index=True)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False, index=True)
    current_state_id = Column(Integer, ForeignKey("order_states.id"), nullable=False)
    delivery_country = Column(String(64), nullable=False)
    payment = Column(String(255), nullable=False)
    total_paid_tax_incl = Column(Numeric(20, 6), nullable=False, default=0)
    date_add = Column(TIMESTAMP(timezone=False), server_default=func.now(), nullable=False)

    customer = relationship("Customer", back_populates="orders")
    current_state = relationship("OrderState", back_populates="orders")
