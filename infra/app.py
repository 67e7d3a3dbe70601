#!/usr/bin/env python3
"""
CDK Application Entry Point

Name Registry - DynamoDB テーブルをデプロイ。
"""
import os
import aws_cdk as cdk

from infra.stacks.name_registry_stack import NameRegistryStack

app = cdk.App()

# 環境設定
env = cdk.Environment(
    account=os.environ.get('CDK_DEFAULT_ACCOUNT'),
    region=os.environ.get('CDK_DEFAULT_REGION', 'eu-west-1'),
)

NameRegistryStack(
    app,
    'NameRegistryStack',
    table_name=os.environ.get('NAMES_DYNAMODB_TABLE_NAME', 'Names'),
    env=env,
    description='Name Registry - DynamoDB Names table',
)

app.synth()
