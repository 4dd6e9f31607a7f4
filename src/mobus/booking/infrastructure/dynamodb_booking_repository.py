import os
from datetime import datetime
from decimal import Decimal

import boto3
from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError

from mobus.booking.domain.entity import Booking
from mobus.booking.domain.enum import (
    BookingChannel,
    BookingStatus,
    PaymentMethod,
    PaymentStatus,
)
from mobus.booking.domain.repository import BookingRepository
from mobus.booking.domain.value_object import BookingId, PassengerContact, SeatPartition
from mobus.fleet.domain.value_object import RouteId, SeatNumber
from mobus.shared.domain import Currency, Money, TravelDate
from mobus.shared.domain.exception import (
    DuplicateResourceException,
    InvalidSeatNumberException,
    OptimisticLockException,
    SeatConflictException,
)

_STATUS_UPDATE = "SET #payment_status = :payment_status, #booking_status = :booking_status"
_STATUS_CONDITION = (
    "#payment_status = :expected_payment_status "
    "AND #booking_status = :expected_booking_status"
)
# TransactWriteItems の上限。予約アイテム 1 件 + 座席確保アイテムで数える
_MAX_TRANSACT_ITEMS = 100


class DynamoDBBookingRepository(BookingRepository):
    """DynamoDBを使用したBookingRepository の具象実装

    予約アイテムとは別に、座席ごとの確保アイテム
    (PK=SEATS#<route>#<date>, SK=SEAT#<seat>) を持つ。
    予約の作成は予約アイテムと全座席の確保アイテムを 1 トランザクションで書き込み、
    確保アイテムに attribute_not_exists 条件を付けることで
    (路線, 乗車日, 座席) の一意制約をストレージ層で保証する。
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)
        # resource 由来のクライアントは Python の型をそのまま受け付ける
        self.client = self.dynamodb.meta.client

    def save(self, booking: Booking) -> None:
        """予約と座席確保アイテムを 1 トランザクションで書き込む"""
        transact_size = 1 + len(booking.seat_numbers) if booking.holds_seats else 1
        if transact_size > _MAX_TRANSACT_ITEMS:
            raise InvalidSeatNumberException(
                f"Too many seats in one booking: {len(booking.seat_numbers)} "
                f"(at most {_MAX_TRANSACT_ITEMS - 1})"
            )

        transact_items = [
            {
                "Put": {
                    "TableName": self.table_name,
                    "Item": self._to_item(booking),
                    "ConditionExpression": "attribute_not_exists(PK)",
                }
            }
        ]
        if booking.holds_seats:
            transact_items.extend(
                {
                    "Put": {
                        "TableName": self.table_name,
                        "Item": {
                            **self._seat_key(booking.partition, seat),
                            "entity_type": "SEAT",
                            "booking_id": str(booking.id),
                        },
                        "ConditionExpression": "attribute_not_exists(PK)",
                    }
                }
                for seat in booking.seat_numbers
            )

        try:
            self.client.transact_write_items(TransactItems=transact_items)
        except ClientError as e:
            if e.response["Error"]["Code"] != "TransactionCanceledException":
                raise
            reasons = e.response.get("CancellationReasons", [])
            conflicts = [
                str(seat)
                for seat, reason in zip(booking.seat_numbers, reasons[1:])
                if reason.get("Code") == "ConditionalCheckFailed"
            ]
            if conflicts:
                raise SeatConflictException(conflicts) from e
            if reasons and reasons[0].get("Code") == "ConditionalCheckFailed":
                raise DuplicateResourceException(
                    f"Booking already exists: {booking.id}"
                ) from e
            raise

    def update(
        self,
        booking: Booking,
        expected_payment_status: PaymentStatus,
        expected_booking_status: BookingStatus,
    ) -> None:
        """ステータスを条件付きで更新する

        CONFIRMED → CANCELLED の場合は座席確保アイテムの削除も同じトランザクションで行う。
        """
        update = {
            "Key": {"PK": f"BOOKING#{booking.id}", "SK": "METADATA"},
            "UpdateExpression": _STATUS_UPDATE,
            "ConditionExpression": _STATUS_CONDITION,
            "ExpressionAttributeNames": {
                "#payment_status": "payment_status",
                "#booking_status": "booking_status",
            },
            "ExpressionAttributeValues": {
                ":payment_status": booking.payment_status.value,
                ":booking_status": booking.booking_status.value,
                ":expected_payment_status": expected_payment_status.value,
                ":expected_booking_status": expected_booking_status.value,
            },
        }

        releases_seats = (
            expected_booking_status == BookingStatus.CONFIRMED and not booking.holds_seats
        )
        if not releases_seats:
            try:
                self.table.update_item(**update)
            except ClientError as e:
                if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                    raise OptimisticLockException(
                        f"Booking status conflict: booking_id={booking.id}"
                    ) from e
                raise
            return

        transact_items = [{"Update": {"TableName": self.table_name, **update}}]
        transact_items.extend(
            {
                "Delete": {
                    "TableName": self.table_name,
                    "Key": self._seat_key(booking.partition, seat),
                    "ConditionExpression": "booking_id = :booking_id",
                    "ExpressionAttributeValues": {":booking_id": str(booking.id)},
                }
            }
            for seat in booking.seat_numbers
        )
        try:
            self.client.transact_write_items(TransactItems=transact_items)
        except ClientError as e:
            if e.response["Error"]["Code"] == "TransactionCanceledException":
                raise OptimisticLockException(
                    f"Booking status conflict: booking_id={booking.id}"
                ) from e
            raise

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索"""
        response = self.table.get_item(
            Key={"PK": f"BOOKING#{booking_id}", "SK": "METADATA"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_by_partition(self, partition: SeatPartition) -> list[Booking]:
        """GSI1 で (路線, 乗車日) の予約を取得する

        GSI は結果整合のため、最終的な重複判定は save のトランザクションに委ねる。
        """
        return self._query(
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq(f"ROUTE#{partition.route_id}")
            & Key("GSI1SK").begins_with(f"DATE#{partition.travel_date}#"),
        )

    def find_occupied_seats(self, partition: SeatPartition) -> set[SeatNumber]:
        """座席確保アイテムを強い整合性で読み、占有中の座席を返す

        確保アイテムは予約の作成・キャンセルと同じトランザクションで書き換わるため、
        GSI と違ってキャンセル直後でも解放済みの座席を占有中と誤認しない。
        """
        items = self._query_items(
            KeyConditionExpression=Key("PK").eq(partition.key)
            & Key("SK").begins_with("SEAT#"),
            ConsistentRead=True,
        )
        return {SeatNumber(item["SK"].removeprefix("SEAT#")) for item in items}

    def find_by_route_id(self, route_id: RouteId) -> list[Booking]:
        return self._query(
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq(f"ROUTE#{route_id}"),
        )

    def find_by_user_id(self, user_id: str) -> list[Booking]:
        return self._query(
            IndexName="GSI2",
            KeyConditionExpression=Key("GSI2PK").eq(f"USER#{user_id}"),
        )

    def _query(self, **kwargs) -> list[Booking]:
        return [self._to_entity(item) for item in self._query_items(**kwargs)]

    def _query_items(self, **kwargs) -> list[dict]:
        """ページングを辿りながらクエリ結果を全件取得する"""
        items: list[dict] = []
        while True:
            response = self.table.query(**kwargs)
            items.extend(response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                return items
            kwargs["ExclusiveStartKey"] = last_key

    @staticmethod
    def _seat_key(partition: SeatPartition, seat: SeatNumber) -> dict:
        return {"PK": partition.key, "SK": f"SEAT#{seat}"}

    def _to_item(self, booking: Booking) -> dict:
        """エンティティを DynamoDB アイテムに変換する"""
        item = {
            "PK": f"BOOKING#{booking.id}",
            "SK": "METADATA",
            "entity_type": "BOOKING",
            "booking_id": str(booking.id),
            "route_id": str(booking.route_id),
            "travel_date": str(booking.travel_date),
            "passenger_name": booking.passenger.name,
            "passenger_phone": booking.passenger.phone,
            "seat_numbers": [str(seat) for seat in booking.seat_numbers],
            "total_amount": str(booking.total_amount.amount),
            "currency": str(booking.total_amount.currency),
            "payment_status": booking.payment_status.value,
            "booking_status": booking.booking_status.value,
            "booked_by": booking.booked_by.value,
            "created_at": booking.created_at.isoformat(),
            "GSI1PK": f"ROUTE#{booking.route_id}",
            "GSI1SK": f"DATE#{booking.travel_date}#BOOKING#{booking.id}",
        }
        # DynamoDB は空値を持てないため、任意項目は値があるときだけ書き込む
        if booking.passenger.email:
            item["passenger_email"] = booking.passenger.email
        if booking.agent_id:
            item["agent_id"] = booking.agent_id
        if booking.payment_method:
            item["payment_method"] = booking.payment_method.value
        if booking.user_id:
            item["user_id"] = booking.user_id
            item["GSI2PK"] = f"USER#{booking.user_id}"
            item["GSI2SK"] = f"BOOKING#{booking.created_at.isoformat()}"
        return item

    def _to_entity(self, item: dict) -> Booking:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        payment_method = item.get("payment_method")
        return Booking(
            id=BookingId(value=item["booking_id"]),
            route_id=RouteId(value=item["route_id"]),
            travel_date=TravelDate(item["travel_date"]),
            passenger=PassengerContact(
                name=item["passenger_name"],
                phone=item["passenger_phone"],
                email=item.get("passenger_email"),
            ),
            seat_numbers=[SeatNumber(seat) for seat in item["seat_numbers"]],
            total_amount=Money(
                amount=Decimal(item["total_amount"]),
                currency=Currency(item["currency"]),
            ),
            payment_status=PaymentStatus(item["payment_status"]),
            booking_status=BookingStatus(item["booking_status"]),
            booked_by=BookingChannel(item["booked_by"]),
            agent_id=item.get("agent_id"),
            user_id=item.get("user_id"),
            payment_method=PaymentMethod(payment_method) if payment_method else None,
            created_at=datetime.fromisoformat(item["created_at"]),
        )
