import os
from decimal import Decimal

import boto3
from boto3.dynamodb.conditions import Attr, Key

from mobus.fleet.domain.entity import Bus, Route
from mobus.fleet.domain.enum import BusStatus
from mobus.fleet.domain.repository import BusRepository, RouteRepository
from mobus.fleet.domain.value_object import BusId, OperatorId, RouteId
from mobus.shared.domain import Currency, Money


class DynamoDBBusRepository(BusRepository):
    """DynamoDBを使用したBusRepository の具象実装"""

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, bus: Bus) -> None:
        """バスをDBに保存する"""
        self.table.put_item(
            Item={
                "PK": f"BUS#{bus.id}",
                "SK": "METADATA",
                "entity_type": "BUS",
                "bus_id": str(bus.id),
                "operator_id": str(bus.operator_id),
                "bus_number": bus.bus_number,
                "bus_type": bus.bus_type,
                "total_seats": bus.total_seats,
                "amenities": bus.amenities,
                "status": bus.status.value,
                "GSI1PK": f"OPERATOR#{bus.operator_id}",
                "GSI1SK": f"BUS#{bus.id}",
            }
        )

    def find_by_id(self, bus_id: BusId) -> Bus | None:
        response = self.table.get_item(
            Key={"PK": f"BUS#{bus_id}", "SK": "METADATA"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_by_operator_id(self, operator_id: OperatorId) -> list[Bus]:
        response = self.table.query(
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq(f"OPERATOR#{operator_id}")
            & Key("GSI1SK").begins_with("BUS#"),
        )
        return [self._to_entity(item) for item in response.get("Items", [])]

    def _to_entity(self, item: dict) -> Bus:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Bus(
            id=BusId(value=item["bus_id"]),
            operator_id=OperatorId(value=item["operator_id"]),
            bus_number=item["bus_number"],
            bus_type=item["bus_type"],
            # DynamoDB の数値は Decimal で返る
            total_seats=int(item["total_seats"]),
            amenities=list(item.get("amenities", [])),
            status=BusStatus(item["status"]),
        )


class DynamoDBRouteRepository(RouteRepository):
    """DynamoDBを使用したRouteRepository の具象実装"""

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, route: Route) -> None:
        """路線をDBに保存する"""
        self.table.put_item(
            Item={
                "PK": f"ROUTE#{route.id}",
                "SK": "METADATA",
                "entity_type": "ROUTE",
                "route_id": str(route.id),
                "bus_id": str(route.bus_id),
                "from_city": route.from_city,
                "to_city": route.to_city,
                "departure_time": route.departure_time,
                "arrival_time": route.arrival_time,
                "duration": route.duration,
                "price_amount": str(route.price.amount),
                "price_currency": str(route.price.currency),
                "operating_days": route.operating_days,
                "is_active": route.is_active,
            }
        )

    def find_by_id(self, route_id: RouteId) -> Route | None:
        response = self.table.get_item(
            Key={"PK": f"ROUTE#{route_id}", "SK": "METADATA"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_all(self) -> list[Route]:
        return self._scan(Attr("entity_type").eq("ROUTE"))

    def find_by_bus_id(self, bus_id: BusId) -> list[Route]:
        return self._scan(
            Attr("entity_type").eq("ROUTE") & Attr("bus_id").eq(str(bus_id))
        )

    def delete(self, route_id: RouteId) -> bool:
        response = self.table.delete_item(
            Key={"PK": f"ROUTE#{route_id}", "SK": "METADATA"},
            ReturnValues="ALL_OLD",
        )
        return "Attributes" in response

    def _scan(self, filter_expression) -> list[Route]:
        """ページングを辿りながら条件に合う路線を全件取得する"""
        kwargs: dict = {"FilterExpression": filter_expression, "ConsistentRead": True}
        routes: list[Route] = []
        while True:
            response = self.table.scan(**kwargs)
            routes.extend(self._to_entity(item) for item in response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                return routes
            kwargs["ExclusiveStartKey"] = last_key

    def _to_entity(self, item: dict) -> Route:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Route(
            id=RouteId(value=item["route_id"]),
            bus_id=BusId(value=item["bus_id"]),
            from_city=item["from_city"],
            to_city=item["to_city"],
            departure_time=item["departure_time"],
            arrival_time=item["arrival_time"],
            duration=item["duration"],
            price=Money(
                amount=Decimal(item["price_amount"]),
                currency=Currency(item["price_currency"]),
            ),
            operating_days=list(item.get("operating_days", [])),
            is_active=bool(item.get("is_active", True)),
        )
