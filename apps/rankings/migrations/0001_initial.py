import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='HallOfFameEntry',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('period_type', models.CharField(choices=[('week', 'Week'), ('month', 'Month')], max_length=10)),
                ('period_start', models.DateField()),
                ('period_end', models.DateField()),
                ('user_name', models.CharField(max_length=150)),
                ('total_amount', models.IntegerField()),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('user', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='hall_of_fame_entries', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name_plural': 'hall of fame entries',
                'db_table': 'hall_of_fame',
                'ordering': ['-period_start', 'period_type'],
                'constraints': [
                    models.UniqueConstraint(fields=('period_type', 'period_start'), name='unique_hall_of_fame_period'),
                ],
            },
        ),
    ]
