"""
Name Registry Main Stack

アプリケーションが利用する DynamoDB テーブルを定義する。
"""
from aws_cdk import (
    Stack,
    CfnOutput,
)
from constructs import Construct

from infra.stacks.data_stack import DataStack


class NameRegistryStack(Stack):
    """Name Registry のメインスタック。"""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        table_name: str = 'Names',
        **kwargs
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        data_stack = DataStack(self, 'Data', table_name=table_name)

        # Outputs
        CfnOutput(self, 'NamesTableName', value=data_stack.names_table.table_name)
        CfnOutput(self, 'NamesTableArn', value=data_stack.names_table.table_arn)
