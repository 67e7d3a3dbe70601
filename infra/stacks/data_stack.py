"""
Data Stack

DynamoDB (On-Demand)
- Names Table (パーティションキー Id のみの単一テーブル)
"""
from aws_cdk import (
    NestedStack,
    RemovalPolicy,
    aws_dynamodb as dynamodb,
)
from constructs import Construct


class DataStack(NestedStack):
    """データ層のリソースを管理するスタック。"""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        table_name: str = 'Names',
        **kwargs
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Names Table
        self.names_table = dynamodb.Table(
            self, 'NamesTable',
            table_name=table_name,
            partition_key=dynamodb.Attribute(
                name='Id',
                type=dynamodb.AttributeType.STRING
            ),
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
            point_in_time_recovery=True,
            encryption=dynamodb.TableEncryption.AWS_MANAGED,
            removal_policy=RemovalPolicy.RETAIN,
        )
